from typing import Any, List, Mapping


def _is_nested(value: Any) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def _values(value: Any) -> List[Any]:
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value)


def format_field_errors(field_errors: Mapping[str, Any]) -> List[str]:
    """Flatten the provider validation errors into '<field> <message>' lines.

    Only the first entry of each field is read, and nesting is followed down
    to field -> errors -> nested -> nested, the shape the API sends back:

    >>> format_field_errors({'field': [[['err1', 'err2']]]})
    ['field err1', 'field err2']
    """
    fields = []

    for field, errors in field_errors.items():
        if not _is_nested(errors):
            fields.append(f'{field} {errors}')
            continue
        errors = _values(errors)
        if not errors:
            continue

        val_errors = errors[0]
        if not _is_nested(val_errors):
            fields.append(f'{field} {val_errors}')
            continue

        for error in _values(val_errors):
            if not _is_nested(error):
                fields.append(f'{field} {error}')
                continue
            for nested_error in _values(error):
                if _is_nested(nested_error):
                    fields.extend(f'{field} {leaf}' for leaf in _values(nested_error))
                else:
                    fields.append(f'{field} {nested_error}')

    return fields
