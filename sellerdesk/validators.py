# sellerdesk/validators.py
import re
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

HTML_PATTERN = re.compile(r'<\s*/?\s*(script|iframe|object|embed|form|img|a|style)\b', re.IGNORECASE)


def validate_no_html(value):
    """
    Reject product text containing HTML tags that could be used for XSS
    on the public product pages.
    """
    if not value:
        return value

    if HTML_PATTERN.search(str(value)):
        raise ValidationError(_("HTML is not allowed in this field."))

    return value
