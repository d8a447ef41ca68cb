from django.urls import path

from .views import export_invoices_xml

urlpatterns = [
    path('exports/invoices/xml/', export_invoices_xml, name='export_invoices_xml'),
]
