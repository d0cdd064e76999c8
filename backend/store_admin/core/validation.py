"""Message catalogue for field validation errors.

Field rules live on the pydantic input models (``schemas/*``). The validator
here is built once with an explicit message catalogue and stored on
``app.state``; it renders pydantic errors, reference checks and delete
conflicts from that catalogue. Fields are named the way the client sent
them (camelCase).
"""

from __future__ import annotations

from typing import Any, Mapping

LETTERS_AND_DIGITS = r"^[a-zA-Z0-9áéíóúâêîôûãõñç ]+$"
HEX_COLOR = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "required": "{field} is required",
        "invalid": "{field} is invalid",
        "too_short": "{field} must contain at least {min} character(s)",
        "too_long": "{field} must contain at most {max} character(s)",
        "letters_digits": "{field} must contain only letters and numbers",
        "hex_color": "{field} must be a valid HEX code (#add6e8)",
        "untrimmed": "{field} cannot start or end with whitespace",
        "not_positive": "{field} must be greater than 0",
        "too_many_decimals": "{field} must have at most {places} decimal places",
        "too_large": "{field} is too large",
        "empty_list": "{field} must contain at least one item",
        "reference_missing": "{field} does not exist in this store",
        "in_use": "{entity} is still in use by {dependents}",
        "body_invalid": "Invalid request body",
    },
    "pt": {
        "required": "{field} é obrigatório",
        "invalid": "{field} é inválido",
        "too_short": "{field} deve conter pelo menos {min} caracter(es)",
        "too_long": "{field} deve conter no máximo {max} caracter(es)",
        "letters_digits": "{field} deve conter apenas letras e números",
        "hex_color": "{field} deve conter um código HEX válido (#add6e8)",
        "untrimmed": "{field} não pode conter espaços em branco no início ou no final",
        "not_positive": "{field} deve ser maior que 0",
        "too_many_decimals": "{field} deve ter no máximo {places} casas decimais",
        "too_large": "{field} é demasiado grande",
        "empty_list": "{field} deve conter pelo menos um elemento",
        "reference_missing": "{field} não existe nesta loja",
        "in_use": "{entity} ainda está a ser usado por {dependents}",
        "body_invalid": "Corpo do pedido inválido",
    },
}

# Field(pattern=...) failures are reported by pattern, not by field.
PATTERN_MESSAGES = {
    LETTERS_AND_DIGITS: "letters_digits",
    HEX_COLOR: "hex_color",
}


class FieldValidator:
    """Renders validation messages from one catalogue."""

    def __init__(self, messages: Mapping[str, str]):
        missing = set(MESSAGES["en"]) - set(messages)
        if missing:
            raise ValueError(f"Message catalogue is missing keys: {sorted(missing)}")
        self._messages = dict(messages)

    @classmethod
    def for_locale(cls, locale: str) -> "FieldValidator":
        try:
            return cls(MESSAGES[locale])
        except KeyError:
            raise ValueError(f"Unsupported validation locale: {locale!r}") from None

    def message(self, key: str, **params: Any) -> str:
        return self._messages[key].format(**params)

    def describe_request_error(self, error: Mapping[str, Any]) -> str:
        """Render one pydantic validation error with this catalogue.

        Errors inside list items (``images[0].url``) are reported against the
        top-level field.
        """

        loc = list(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        names = [part for part in loc if isinstance(part, str)]
        if not names:
            return self.message("body_invalid")

        field = names[0]
        if len(loc) > 1:
            return self.message("invalid", field=field)

        key, params = self._catalogue_key(error)
        return self.message(key, field=field, **params)

    def _catalogue_key(self, error: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        kind = error.get("type", "")
        ctx = error.get("ctx") or {}
        value = error.get("input")

        if kind == "missing" or (value is None and kind.endswith("_type")):
            return "required", {}
        if kind == "string_too_short":
            if value == "":
                return "required", {}
            return "too_short", {"min": ctx["min_length"]}
        if kind == "string_too_long":
            return "too_long", {"max": ctx["max_length"]}
        if kind == "string_pattern_mismatch":
            return PATTERN_MESSAGES.get(ctx.get("pattern"), "invalid"), {}
        if kind == "greater_than":
            return "not_positive", {}
        if kind == "decimal_max_places":
            return "too_many_decimals", {"places": ctx["decimal_places"]}
        if kind in ("decimal_max_digits", "decimal_whole_digits"):
            return "too_large", {}
        if kind == "too_short":
            return "empty_list", {}
        # Custom error types raised by model validators carry a catalogue key.
        if kind in self._messages:
            return kind, {}
        return "invalid", {}
