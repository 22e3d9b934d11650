"""
Irregular forms that bypass the stemming steps.

Each entry maps a canonical stem to "/"-terminated surface forms:

    ("sky", "sky/skies/")  ->  sky -> sky, skies -> sky

A surface form must match the whole word exactly (same bytes, same
length); there is no prefix matching. The table is built once at import
and shared read-only by every context and thread.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

IRREGULAR_FORMS: Tuple[Tuple[str, str], ...] = (
    ("sky", "sky/skies/"),
    ("die", "dying/"),
    ("lie", "lying/"),
    ("tie", "tying/"),
    ("news", "news/"),
    ("inning", "innings/inning/"),
    ("outing", "outings/outing/"),
    ("canning", "cannings/canning/"),
    ("howe", "howe/"),
)


def build_irregular_table(forms: Iterable[Tuple[str, str]] = IRREGULAR_FORMS) -> Mapping[bytes, bytes]:
    """
    Build an immutable surface form -> stem lookup.

    Args:
        forms: (stem, "form1/form2/.../") pairs

    Returns:
        Read-only mapping of ASCII bytes to ASCII bytes

    Raises:
        ValueError: Empty stem, no surface forms, or a surface form
            registered for two different stems
    """
    table = {}
    for stem, surface_forms in forms:
        if not stem:
            raise ValueError(f"Irregular entry has an empty stem: {surface_forms!r}")

        canonical = stem.encode("ascii")
        variants = [form for form in surface_forms.split("/") if form]
        if not variants:
            raise ValueError(f"Irregular stem {stem!r} has no surface forms")

        for form in variants:
            key = form.encode("ascii")
            existing = table.get(key)
            if existing is not None and existing != canonical:
                raise ValueError(
                    f"Surface form {form!r} maps to both "
                    f"{existing.decode()!r} and {stem!r}"
                )
            table[key] = canonical

    return MappingProxyType(table)


IRREGULARS = build_irregular_table()
