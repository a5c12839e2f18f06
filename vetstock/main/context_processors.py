from .auth import is_admin_session


def admin_session(request):
    return {"is_admin": is_admin_session(request)}
