from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST, require_http_methods

from .aggregation import aggregate, build_alerts
from .exceptions import InvalidInput
from .http import api_view, json_body, parse_int
from .ledger import record_usage
from .services import (
    clean_facility_type, create_medicine, delete_medicine, get_medicine,
    list_medicines, update_medicine,
)
from .status import today_utc


@api_view
@require_http_methods(["GET", "POST"])
def medicine_collection(request):
    if request.method == "POST":
        medicine = create_medicine(json_body(request))
        return JsonResponse(medicine.to_dict(), status=201)

    facility_type = clean_facility_type(request.GET.get("facility_type"))
    today = today_utc()
    medicines = [m.to_dict(today) for m in list_medicines(facility_type)]
    return JsonResponse(medicines, safe=False)


@api_view
@require_http_methods(["GET", "PUT", "DELETE"])
def medicine_detail(request, medicine_id):
    medicine = get_medicine(medicine_id)

    if request.method == "PUT":
        medicine = update_medicine(medicine, json_body(request))
        return JsonResponse({
            "message": "Medicine updated successfully",
            "updatedMedicine": medicine.to_dict(),
        })

    if request.method == "DELETE":
        delete_medicine(medicine)
        return JsonResponse({"message": "Deleted successfully"})

    return JsonResponse(medicine.to_dict())


def _usage_quantity(data):
    if data.get("quantity") in (None, ""):
        raise InvalidInput("Quantity is required")
    return parse_int(data["quantity"], "Quantity", minimum=1)


@api_view
@require_http_methods(["GET", "POST"])
def medicine_usage(request, medicine_id):
    if request.method == "POST":
        quantity = _usage_quantity(json_body(request))
        outcome = record_usage(medicine_id, quantity)
        return JsonResponse(outcome.record.to_dict(), status=201)

    medicine = get_medicine(medicine_id)
    records = [r.to_dict() for r in medicine.usage_records.select_related('medicine')]
    return JsonResponse(records, safe=False)


@api_view
@require_POST
def log_usage(request):
    """Log usage with the medicine id in the body: {"medicineId": 1, "quantity": 4}"""
    data = json_body(request)
    if data.get("medicineId") in (None, ""):
        raise InvalidInput("Invalid input: medicineId and positive quantity required")
    medicine_id = parse_int(data["medicineId"], "medicineId", minimum=1)
    outcome = record_usage(medicine_id, _usage_quantity(data))
    return JsonResponse(outcome.record.to_dict(), status=201)


@api_view
@require_GET
def inventory_summary(request):
    facility_type = clean_facility_type(request.GET.get("facility_type"))
    summary = aggregate(
        list_medicines(facility_type),
        today=today_utc(),
        window_days=settings.VETSTOCK_EXPIRING_SOON_DAYS,
    )
    return JsonResponse(summary.as_dict())


@api_view
@require_GET
def inventory_alerts(request):
    facility_type = clean_facility_type(request.GET.get("facility_type"))
    alerts = build_alerts(
        list_medicines(facility_type),
        today=today_utc(),
        window_days=settings.VETSTOCK_EXPIRING_SOON_DAYS,
    )
    return JsonResponse({"count": len(alerts), "alerts": [a.as_dict() for a in alerts]})
