# pantry/utils/validation.py

from typing import Any, Callable, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

FormT = TypeVar("FormT", bound=BaseModel)
ResultT = TypeVar("ResultT")


def validate_form(
    form_data: Mapping[str, Any],
    schema: Type[FormT],
    success_fn: Callable[[FormT], ResultT],
    error_fn: Callable[[Dict[str, str]], ResultT],
) -> ResultT:
    """
    Validate a submitted form against ``schema``.

    Calls ``success_fn`` with the parsed model, or ``error_fn`` with a dict
    mapping each offending field name to its first error message.
    """
    try:
        data = schema.model_validate(dict(form_data))
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            errors.setdefault(field, err["msg"])
        return error_fn(errors)

    return success_fn(data)
