from django import forms
from django.core.exceptions import ValidationError
from .models import Facility, FacilityType


class FacilityForm(forms.ModelForm):
    """Form for creating and editing facilities"""

    class Meta:
        model = Facility
        fields = ['name', 'type']
        widgets = {
            'name': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Facility Name (e.g., Chennai Veterinary Dispensary)'
            }),
            'type': forms.Select(attrs={'class': 'form-control'}),
        }

    def clean_name(self):
        name = (self.cleaned_data.get('name') or '').strip()
        if not name:
            raise ValidationError("Facility name is required.")
        return name


class FacilitySearchForm(forms.Form):
    q = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Search facilities by name or type...'
        })
    )
    type = forms.ChoiceField(
        required=False,
        choices=[('', 'All Types')] + FacilityType.choices,
        widget=forms.Select(attrs={'class': 'form-control'})
    )
