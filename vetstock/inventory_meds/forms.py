from django import forms
from django.core.exceptions import ValidationError

from facilities.models import Facility, FacilityType
from .models import Medicine


class MedicineForm(forms.ModelForm):
    """Form for creating medicine entries"""

    class Meta:
        model = Medicine
        fields = ['name', 'stock', 'weekly_requirement', 'expiry_date', 'facility']
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Medicine name'}),
            'stock': forms.NumberInput(attrs={'class': 'form-control', 'min': '0'}),
            'weekly_requirement': forms.NumberInput(attrs={'class': 'form-control', 'min': '1'}),
            'expiry_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'},
                                           format='%Y-%m-%d'),
            'facility': forms.Select(attrs={'class': 'form-control'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if 'facility' in self.fields:
            self.fields['facility'].queryset = Facility.objects.order_by('name')
            self.fields['facility'].empty_label = 'Select Facility'

    def clean_name(self):
        name = (self.cleaned_data.get('name') or '').strip()
        if not name:
            raise ValidationError("Medicine name is required.")
        return name

    def clean_stock(self):
        stock = self.cleaned_data.get('stock')
        if stock is None or stock < 0:
            raise ValidationError("Stock must be zero or a positive integer.")
        return stock

    def clean_weekly_requirement(self):
        weekly_requirement = self.cleaned_data.get('weekly_requirement')
        if weekly_requirement is None or weekly_requirement <= 0:
            raise ValidationError("Weekly requirement must be greater than zero.")
        return weekly_requirement


class MedicineEditForm(MedicineForm):
    """Form for editing existing medicine (facility is fixed once created)"""

    class Meta(MedicineForm.Meta):
        fields = ['name', 'stock', 'weekly_requirement', 'expiry_date']


class UsageForm(forms.Form):
    """Form for logging medicine usage"""

    quantity = forms.IntegerField(
        min_value=1,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'placeholder': 'Quantity used', 'min': '1'})
    )

    def __init__(self, *args, medicine=None, **kwargs):
        self.medicine = medicine
        super().__init__(*args, **kwargs)

    def clean_quantity(self):
        quantity = self.cleaned_data.get('quantity')
        # Checked again under a row lock when the usage is recorded
        if self.medicine and quantity and quantity > self.medicine.stock:
            raise ValidationError(
                f"Cannot use {quantity}. Only {self.medicine.stock} in stock."
            )
        return quantity


class SearchFilterForm(forms.Form):
    """Dashboard search and facility type filter"""

    search = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Search medicines or facilities...'})
    )
    facility_type = forms.ChoiceField(
        required=False,
        choices=[('', 'All Facilities')] + FacilityType.choices,
        widget=forms.Select(attrs={'class': 'form-control'})
    )
