from django.urls import path
from . import views

urlpatterns = [
    path('', views.ListingListCreateView.as_view(), name='listing-list'),
    path('<int:pk>/', views.ListingDetailView.as_view(), name='listing-detail'),
]
