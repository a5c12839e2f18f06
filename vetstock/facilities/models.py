from django.db import models


class FacilityType(models.TextChoices):
    DISPENSARY = "Dispensary", "Dispensary"
    HOSPITAL = "Hospital", "Hospital"
    CLINICIAN_CENTER = "ClinicianCenter", "Clinician Center"
    POLYCLINIC = "Polyclinic", "Polyclinic"


class Facility(models.Model):
    """A healthcare site that stocks medicines"""

    name = models.CharField(max_length=255, db_index=True)
    type = models.CharField(max_length=20, choices=FacilityType.choices, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "Facilities"

    def __str__(self):
        return f"{self.name} ({self.get_type_display()})"

    def to_dict(self):
        return {
            "id": self.pk,
            "name": self.name,
            "type": self.type,
        }
