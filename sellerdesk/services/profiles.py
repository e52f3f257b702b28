# sellerdesk/services/profiles.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import DatabaseError

from sellerdesk.models import SellerProfile

logger = logging.getLogger(__name__)


class ProfileMissing(DatabaseError):
    """Contact update targeted an account that has no profile row."""


@dataclass
class ProfileView:
    facebook_url: str = ""
    phone_number: str = ""
    followers_count: int = 0
    exists: bool = False


def load_profile(user) -> ProfileView:
    """
    Single read of the user's profile. A missing row, or a failed read,
    leaves the defaults in place.
    """
    try:
        profile = SellerProfile.objects.filter(owner=user).first()
        if profile is None:
            return ProfileView()
        return ProfileView(
            facebook_url=profile.facebook_url or "",
            phone_number=profile.phone_number or "",
            followers_count=profile.followers.count(),
            exists=True,
        )
    except DatabaseError:
        logger.exception("could not load profile", extra={"user": user.pk})
        return ProfileView()


def update_contact(user, *, facebook_url: str, phone_number: str) -> None:
    """
    Overwrite both contact fields. No merge with concurrent edits: the last
    save wins.
    """
    updated = SellerProfile.objects.filter(owner=user).update(
        facebook_url=facebook_url or "",
        phone_number=phone_number or "",
    )
    if not updated:
        raise ProfileMissing(f"no profile for user {user.pk}")
    logger.info("contact info updated", extra={"user": user.pk})
