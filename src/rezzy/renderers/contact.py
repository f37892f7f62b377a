"""Contact details shared by the resume and cover letter headers."""

from __future__ import annotations

from rezzy.latex.markup import latex_command
from rezzy.models.resume import Basics


def location_text(basics: Basics) -> str:
    """``"City, Region"`` from whichever of the two is present."""
    location = basics.location
    if location is None:
        return ""
    return ", ".join(part for part in (location.city, location.region) if part)


def contact_parts(basics: Basics) -> list[str]:
    """Phone and location, each only when present."""
    return [part for part in (basics.phone, location_text(basics)) if part]


def contact_links(basics: Basics) -> list[str]:
    """Hyperlinks for email, personal site and profiles.

    The personal url is skipped when a profile already links to it.
    """
    profile_urls = [profile.url for profile in basics.profiles if profile.url]
    links: list[str] = []
    if basics.email:
        links.append(latex_command("href", [f"mailto:{basics.email}", basics.email]))
    if basics.url and basics.url not in profile_urls:
        links.append(latex_command("href", [basics.url, basics.url]))
    links.extend(latex_command("href", [url, url]) for url in profile_urls)
    return links
