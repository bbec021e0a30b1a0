from django.urls import path
from . import views

urlpatterns = [
    path('status/', views.MembershipStatusView.as_view(), name='membership-status'),
    path('tiers/', views.TierTableView.as_view(), name='membership-tiers'),
]
