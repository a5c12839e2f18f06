from django.shortcuts import render, redirect, get_object_or_404
from django.contrib import messages
from django.db.models import Count, Q
from django.views.decorators.http import require_POST

from inventory_meds.exceptions import InventoryError
from .forms import FacilityForm, FacilitySearchForm
from .models import Facility, FacilityType
from .services import delete_facility as delete_facility_record


def add_facility(request):
    """Add a new facility"""

    if request.method == 'POST':
        form = FacilityForm(request.POST)
        if form.is_valid():
            facility = form.save()
            messages.success(request, f"Facility '{facility.name}' added successfully!")
            return redirect('facilities:add_facility')
        for field, errors in form.errors.items():
            for error in errors:
                messages.error(request, f"{field}: {error}")
    else:
        form = FacilityForm()

    context = {
        "title": "Add Facility",
        "form": form,
    }
    return render(request, "facilities/add_facility.html", context)


def facility_list(request):
    """List facilities with search by name or type"""

    facilities = Facility.objects.annotate(medicine_count=Count('medicines'))

    form = FacilitySearchForm(request.GET or None)
    if form.is_valid():
        query = form.cleaned_data.get('q')
        if query:
            # Match on the display label too, so "clinician center" finds ClinicianCenter
            matching_types = [
                value for value, label in FacilityType.choices
                if query.lower() in label.lower()
            ]
            facilities = facilities.filter(
                Q(name__icontains=query) | Q(type__in=matching_types)
            )

        facility_type = form.cleaned_data.get('type')
        if facility_type:
            facilities = facilities.filter(type=facility_type)

    context = {
        "title": "Facilities",
        "facilities": facilities.order_by('name'),
        "form": form,
    }
    return render(request, "facilities/facility_list.html", context)


def edit_facility(request, facility_id):
    """Edit an existing facility"""

    facility = get_object_or_404(Facility, pk=facility_id)

    if request.method == 'POST':
        form = FacilityForm(request.POST, instance=facility)
        if form.is_valid():
            form.save()
            messages.success(request, f"Facility '{facility.name}' updated successfully!")
            return redirect('facilities:facility_list')
    else:
        form = FacilityForm(instance=facility)

    context = {
        "title": f"Edit Facility: {facility.name}",
        "form": form,
        "facility": facility,
    }
    return render(request, "facilities/edit_facility.html", context)


@require_POST
def delete_facility(request, facility_id):
    """Delete a facility that no medicine references"""

    facility = get_object_or_404(Facility, pk=facility_id)
    try:
        delete_facility_record(facility)
        messages.success(request, "Facility deleted successfully!")
    except InventoryError as e:
        messages.error(request, e.message)
    return redirect('facilities:facility_list')
