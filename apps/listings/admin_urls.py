from django.urls import path
from . import views

urlpatterns = [
    path('listings/<int:pk>/', views.AdminListingDeleteView.as_view(), name='admin-delete-listing'),
]
