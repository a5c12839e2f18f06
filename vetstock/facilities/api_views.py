from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from inventory_meds.http import api_view, json_body
from .models import Facility
from .services import (
    create_facility, delete_facility, get_facility, update_facility,
)


@api_view
@require_http_methods(["GET", "POST"])
def facility_collection(request):
    if request.method == "POST":
        facility = create_facility(json_body(request))
        return JsonResponse(facility.to_dict(), status=201)

    facilities = [f.to_dict() for f in Facility.objects.order_by('name')]
    return JsonResponse(facilities, safe=False)


@api_view
@require_http_methods(["GET", "PUT", "DELETE"])
def facility_detail(request, facility_id):
    facility = get_facility(facility_id)

    if request.method == "PUT":
        facility = update_facility(facility, json_body(request))
        return JsonResponse({
            "message": "Facility updated successfully",
            "updatedFacility": facility.to_dict(),
        })

    if request.method == "DELETE":
        delete_facility(facility)
        return JsonResponse({"message": "Facility deleted successfully"})

    return JsonResponse(facility.to_dict())
