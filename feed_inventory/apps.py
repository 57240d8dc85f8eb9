from django.apps import AppConfig


class FeedInventoryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "feed_inventory"
    verbose_name = "Feed & Supplies Inventory"
