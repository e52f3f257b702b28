from django import forms
from django.utils.translation import gettext_lazy as _

from .models import Product
from .services.products import original_price_fits, PRICE_TOO_HIGH_MESSAGE
from .validators import validate_no_html
from .views.helpers import normalize_optional_url


IMAGE_REQUIRED_MESSAGE = _("Please upload a product image")


def has_image(data) -> bool:
    """The upload widget posts its reference as `image`; blank means no upload yet."""
    return bool(str(data.get("image") or "").strip())


class ProductUploadForm(forms.Form):
    name = forms.CharField(
        label=_("Product Name"),
        max_length=255,
        validators=[validate_no_html],
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _("Enter product name")}),
    )
    category = forms.ChoiceField(
        label=_("Category"),
        choices=[("", _("Select category"))] + Product.CATEGORY_CHOICES,
        widget=forms.Select(attrs={'class': 'form-select'}),
    )

    # malformed numbers are rejected here; nothing non-numeric reaches the write
    price = forms.DecimalField(
        label=_("Price"),
        min_value=1,
        max_digits=12,
        decimal_places=2,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'placeholder': '0', 'min': '1'}),
    )
    stock = forms.IntegerField(
        label=_("Stock"),
        min_value=1,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'placeholder': '0', 'min': '1'}),
    )
    discount = forms.IntegerField(
        label=_("Discount (%)"),
        min_value=0,
        max_value=99,
        initial=0,
        required=False,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'min': '0', 'max': '99'}),
    )

    image = forms.CharField(
        label=_("Product Image"),
        max_length=500,
        error_messages={'required': IMAGE_REQUIRED_MESSAGE},
        widget=forms.HiddenInput(),
    )
    description = forms.CharField(
        label=_("Description"),
        validators=[validate_no_html],
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3, 'placeholder': _("Describe your product...")}),
    )

    def clean_discount(self):
        discount = self.cleaned_data.get("discount")
        return 0 if discount is None else discount

    def clean_image(self):
        return (self.cleaned_data.get("image") or "").strip()

    def clean(self):
        cleaned = super().clean()
        price = cleaned.get("price")
        discount = cleaned.get("discount") or 0
        if price is not None and not original_price_fits(price, discount):
            self.add_error("price", PRICE_TOO_HIGH_MESSAGE)
        return cleaned


class ContactSettingsForm(forms.Form):
    facebook_url = forms.CharField(
        label=_("Facebook URL"),
        max_length=500,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'https://facebook.com/yourpage'}),
    )
    phone_number = forms.CharField(
        label=_("Phone Number"),
        max_length=30,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': '+63 XXX XXX XXXX'}),
    )

    def clean_facebook_url(self):
        return normalize_optional_url(self.cleaned_data.get("facebook_url"))

    def clean_phone_number(self):
        return (self.cleaned_data.get("phone_number") or "").strip()
