from django.urls import path
from . import views

urlpatterns = [
    path('pending/', views.PendingCompaniesView.as_view(), name='admin-pending-companies'),
    path('approve/<int:pk>/', views.ApproveCompanyView.as_view(), name='admin-approve-company'),
    path('companies/<int:pk>/date/', views.CompanyMembershipDateView.as_view(), name='admin-company-date'),
]
