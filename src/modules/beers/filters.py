import django_filters

from modules.beers.models import Beer


class BeerFilter(django_filters.FilterSet):
    brand = django_filters.CharFilter(field_name="brand", lookup_expr="icontains")
    type = django_filters.CharFilter(field_name="type", lookup_expr="iexact")

    class Meta:
        model = Beer
        fields = ["brand", "type"]
