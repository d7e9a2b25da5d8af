"""Serializer helpers shared by the CRUD endpoints."""

from __future__ import annotations

from .exceptions import MissingField, field_code


class RequiredFieldsMixin:
    """Check ``required_fields`` in order before any other field validation.

    With ``missing_code`` set every absent field fails with that code,
    otherwise the code is ``MISSING_<FIELD>`` for the first absent one.
    Skipped on partial updates.
    """

    required_fields: tuple[str, ...] = ()
    missing_code: str | None = None

    def to_internal_value(self, data):  # type: ignore
        if not self.partial and hasattr(data, "get"):
            missing = [name for name in self.required_fields if data.get(name) in (None, "")]
            if missing and self.missing_code:
                raise MissingField(
                    f"Missing required fields: {', '.join(missing)}",
                    self.missing_code,
                )
            if missing:
                raise MissingField(f"{missing[0]} is required", f"MISSING_{field_code(missing[0])}")
        return super().to_internal_value(data)

    def get_fields(self):  # type: ignore
        fields = super().get_fields()
        if self.instance is not None:
            for name in getattr(self, "create_only_fields", ()):
                fields[name].read_only = True
        return fields
