from django.apps import AppConfig


class InventoryMedsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "inventory_meds"
    verbose_name = "Veterinary Medicine Inventory"
