from decimal import Decimal, InvalidOperation


def parse_amount(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, bool):
        raise ValueError("Amount must be a number")
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip()
        if not text:
            raise ValueError("Amount is empty")
        try:
            amount = Decimal(text)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    if amount.is_zero():
        # drop the sign of -0
        amount = abs(amount)
    if amount < 0:
        raise ValueError("Amount cannot be negative")
    return amount


def normalize_label(value: str | None) -> str:
    if value is None:
        return ""
    label = str(value).strip()
    try:
        label.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("Label contains characters that cannot be saved") from exc
    return label
