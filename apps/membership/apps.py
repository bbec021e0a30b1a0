from django.apps import AppConfig


class MembershipConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.membership'
    verbose_name = 'Membership'

    # Built once at startup from settings; shared read-only afterwards.
    loyalty_config = None

    def ready(self):
        from .config import load_loyalty_config
        self.loyalty_config = load_loyalty_config()
