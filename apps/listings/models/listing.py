from django.db import models


class Listing(models.Model):
    """A resource, event, session or collaboration published by a company"""
    CATEGORY_CHOICES = [
        ('resource', 'Resource'),
        ('event', 'Event'),
        ('session', 'Session'),
        ('collaboration', 'Collaboration'),
    ]

    company = models.ForeignKey('companies.Company', on_delete=models.CASCADE, related_name='listings')
    title = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'listings'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.title} ({self.get_category_display()})"
