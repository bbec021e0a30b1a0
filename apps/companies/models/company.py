from django.db import models


class Company(models.Model):
    """A member organization of the network"""
    SIZE_CHOICES = [
        ('startup', 'Startup'),
        ('small', 'Small'),
        ('medium', 'Medium'),
        ('large', 'Large'),
    ]

    company_name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    industry = models.CharField(max_length=100, null=True, blank=True)
    size = models.CharField(max_length=20, choices=SIZE_CHOICES, null=True, blank=True)
    website = models.URLField(max_length=500, null=True, blank=True)
    # Source of truth for the loyalty tier; the tier itself is never stored.
    membership_start_date = models.DateField(null=True, blank=True)
    is_approved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'companies'
        verbose_name = 'Company'
        verbose_name_plural = 'Companies'
        ordering = ['company_name']

    def __str__(self):
        return self.company_name

    def approve(self, enrolled_on):
        """Approve the company, enrolling it on enrolled_on unless already enrolled"""
        self.is_approved = True
        if self.membership_start_date is None:
            self.membership_start_date = enrolled_on
        self.save(update_fields=['is_approved', 'membership_start_date', 'updated_at'])
