from django.apps import AppConfig


class DashboardsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dashboards"
    verbose_name = "Dashboards & Reports"

    def ready(self):
        """
        Import signals to register them when the app is ready.

        Keeps cached reports in step with farm records.
        """
        import dashboards.signals  # noqa: F401
