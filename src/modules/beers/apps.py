from django.apps import AppConfig


class BeersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.beers"
    label = "beers"
    verbose_name = "Beer stock"
