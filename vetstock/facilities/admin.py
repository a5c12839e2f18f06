from django.contrib import admin
from .models import Facility


@admin.register(Facility)
class FacilityAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'medicine_count', 'created_at']
    search_fields = ['name']
    list_filter = ['type', 'created_at']
    readonly_fields = ['created_at', 'updated_at']

    def medicine_count(self, obj):
        return obj.medicines.count()
    medicine_count.short_description = 'Medicines'
