from django.contrib import admin

from modules.beers.models import Beer


@admin.register(Beer)
class BeerAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "brand", "type", "quantity", "max")
    list_filter = ("type",)
    search_fields = ("name", "brand")
    readonly_fields = ("created_at", "updated_at")
