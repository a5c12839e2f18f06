from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('administrators/', admin.site.urls),
    path('', include('main.urls')),
    path('', include('inventory_meds.urls')),
    path('admin/facilities/', include('facilities.urls')),

    # JSON API
    path('api/', include('main.api_urls')),
    path('api/', include('facilities.api_urls')),
    path('api/', include('inventory_meds.api_urls')),
]

admin.site.site_header = "VetStock Administration"
admin.site.site_title = "VetStock Admin"
