from django.contrib import admin
from django.utils.html import format_html

from .models import Medicine, UsageRecord
from .status import StockStatus

STATUS_COLOURS = {
    StockStatus.EXPIRED: "red",
    StockStatus.LOW_STOCK: "orange",
    StockStatus.SUFFICIENT: "green",
}


class UsageRecordInline(admin.TabularInline):
    model = UsageRecord
    extra = 0
    fields = ('quantity', 'usage_date')
    readonly_fields = ('quantity', 'usage_date')
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Medicine)
class MedicineAdmin(admin.ModelAdmin):
    list_display = ['name', 'facility', 'stock', 'weekly_requirement', 'expiry_date', 'stock_status']
    search_fields = ['name', 'facility__name']
    list_filter = ['facility__type', 'facility', 'expiry_date']
    readonly_fields = ['created_at', 'updated_at']
    list_select_related = ['facility']
    inlines = [UsageRecordInline]
    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'facility')
        }),
        ('Inventory', {
            'fields': ('stock', 'weekly_requirement', 'expiry_date')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def stock_status(self, obj):
        status = obj.status()
        return format_html('<span style="color: {};">{}</span>', STATUS_COLOURS[status], status.label)
    stock_status.short_description = 'Status'


@admin.register(UsageRecord)
class UsageRecordAdmin(admin.ModelAdmin):
    list_display = ['medicine', 'quantity', 'usage_date']
    search_fields = ['medicine__name']
    list_filter = ['usage_date']
    raw_id_fields = ['medicine']

    def has_add_permission(self, request):
        # Usage is logged through the ledger so stock stays in step
        return False

    def has_change_permission(self, request, obj=None):
        # Usage records are immutable
        return False

    def has_delete_permission(self, request, obj=None):
        return False
