import logging

from django.conf import settings
from django.contrib import messages
from django.core.paginator import Paginator
from django.db.models import Q
from django.http import HttpResponse
from django.shortcuts import render, redirect, get_object_or_404

from .aggregation import aggregate, build_alerts, stock_chart_data
from .exceptions import InventoryError
from .exports import EXPORT_FORMATS
from .forms import MedicineForm, MedicineEditForm, UsageForm, SearchFilterForm
from .ledger import record_usage
from .models import Medicine
from .reports import format_report, report_filename
from .services import clean_facility_type, delete_medicine as delete_medicine_record
from .status import today_utc

logger = logging.getLogger(__name__)


def inventory_dashboard(request):
    """Main dashboard with summary counters, alerts, chart data and the medicine list"""

    today = today_utc()
    window_days = settings.VETSTOCK_EXPIRING_SOON_DAYS

    medicines = Medicine.objects.select_related('facility').order_by('name')

    # Apply filters
    form = SearchFilterForm(request.GET or None)
    search = ''
    facility_type = None
    if form.is_valid():
        facility_type = form.cleaned_data.get('facility_type') or None
        search = form.cleaned_data.get('search')

    if facility_type:
        medicines = medicines.filter(facility__type=facility_type)

    # Summary counters follow the facility filter but not the text search
    in_scope = list(medicines)
    summary = aggregate(in_scope, today=today, window_days=window_days)
    alerts = build_alerts(in_scope, today=today, window_days=window_days)
    chart_data = stock_chart_data(in_scope, today=today, window_days=window_days)

    if search:
        medicines = medicines.filter(
            Q(name__icontains=search) |
            Q(facility__name__icontains=search)
        )

    # Pagination
    paginator = Paginator(medicines, settings.VETSTOCK_PAGE_SIZE)
    page_obj = paginator.get_page(request.GET.get('page'))
    for medicine in page_obj:
        medicine.current_status = medicine.status(today)
        medicine.expiring_soon = medicine.is_expiring_soon(today, window_days)

    context = {
        "title": "Medicine Dashboard",
        "medicines": page_obj,
        "form": form,
        "summary": summary,
        "alerts": alerts,
        "chart_data": chart_data,
        "facility_type": facility_type or "",
        "search": search,
        "export_formats": sorted(EXPORT_FORMATS),
    }
    return render(request, "inventory_meds/dashboard.html", context)


def add_medicine(request):
    """Add new medicine entry"""

    if request.method == 'POST':
        form = MedicineForm(request.POST)
        if form.is_valid():
            medicine = form.save()
            logger.info("Medicine %s added to %s", medicine.name, medicine.facility.name)
            messages.success(request, f"Medicine '{medicine.name}' added successfully!")
            return redirect('inventory_meds:dashboard')
        for field, errors in form.errors.items():
            for error in errors:
                messages.error(request, f"{field}: {error}")
    else:
        form = MedicineForm()

    context = {
        "title": "Add New Medicine",
        "form": form,
    }
    return render(request, "inventory_meds/add_medicine.html", context)


def edit_medicine(request, medicine_id):
    """Edit existing medicine"""

    medicine = get_object_or_404(Medicine.objects.select_related('facility'), pk=medicine_id)

    if request.method == 'POST':
        form = MedicineEditForm(request.POST, instance=medicine)
        if form.is_valid():
            form.save()
            messages.success(request, f"Medicine '{medicine.name}' updated successfully!")
            return redirect('inventory_meds:dashboard')
    else:
        form = MedicineEditForm(instance=medicine)

    context = {
        "title": f"Edit Medicine: {medicine.name}",
        "form": form,
        "medicine": medicine,
    }
    return render(request, "inventory_meds/edit_medicine.html", context)


def delete_medicine(request, medicine_id):
    """Delete a medicine and its usage history after confirmation"""

    medicine = get_object_or_404(Medicine, pk=medicine_id)

    if request.method == 'POST':
        try:
            delete_medicine_record(medicine)
            messages.success(request, "Medicine deleted successfully!")
            return redirect('inventory_meds:dashboard')
        except InventoryError as e:
            messages.error(request, f"Failed to delete the medicine. {e.message}")

    context = {
        "title": "Delete Medicine",
        "medicine": medicine,
    }
    return render(request, "inventory_meds/confirm_delete.html", context)


def medicine_usage(request, medicine_id):
    """Usage history for a medicine, with a form to log new usage"""

    medicine = get_object_or_404(Medicine.objects.select_related('facility'), pk=medicine_id)

    if request.method == 'POST':
        form = UsageForm(request.POST, medicine=medicine)
        if form.is_valid():
            try:
                outcome = record_usage(medicine.pk, form.cleaned_data['quantity'])
                messages.success(
                    request,
                    f"Logged usage of {outcome.record.quantity} {medicine.name}. "
                    f"Remaining stock: {outcome.medicine.stock}."
                )
                return redirect('inventory_meds:medicine_usage', medicine_id=medicine.pk)
            except InventoryError as e:
                messages.error(request, f"Usage was not saved. {e.message}")
    else:
        form = UsageForm(medicine=medicine)

    context = {
        "title": f"Usage: {medicine.name}",
        "medicine": medicine,
        "usage_records": medicine.usage_records.all(),
        "form": form,
    }
    return render(request, "inventory_meds/medicine_usage.html", context)


def export_report(request):
    """Download the inventory report as PDF, Excel or CSV"""

    export_format = request.GET.get('format', 'pdf')
    if export_format not in EXPORT_FORMATS:
        messages.error(request, f"Unsupported export format '{export_format}'.")
        return redirect('inventory_meds:dashboard')

    try:
        facility_type = clean_facility_type(request.GET.get('facility_type'))
    except InventoryError as e:
        messages.error(request, e.message)
        return redirect('inventory_meds:dashboard')

    medicines = list(Medicine.objects.select_related('facility'))
    report = format_report(
        medicines, facility_type, today=today_utc(),
        window_days=settings.VETSTOCK_EXPIRING_SOON_DAYS,
    )

    writer, content_type = EXPORT_FORMATS[export_format]
    response = HttpResponse(writer(report), content_type=content_type)
    response['Content-Disposition'] = f'attachment; filename="{report_filename(export_format)}"'
    logger.info("Exported %s report (%s)", export_format, report.facility_label)
    return response
