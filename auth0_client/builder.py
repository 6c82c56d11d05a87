"""Request builders and the immutable requests they produce.

A builder starts empty, accepts any number of setter / append calls in any
order (scalars: last write wins; lists: accumulate) and ends with
``finalize()``, which either returns a frozen ``Request`` or raises
``ValidationError``. ``send()`` is finalize + encode + invoke.
"""
from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Tuple, Type, TypeVar

from .context import Context
from .encoding import WireRequest, encode, list_values
from .exceptions import ValidationError
from .invocation import decode_model, invoke
from .transport import Transport

B = TypeVar("B", bound="RequestBuilder")


@dataclass(frozen=True)
class Request:
    """Base for finalized requests.

    Subclasses add their parameters as dataclass fields and implement
    ``to_wire``. The context is shared by reference with the builder.
    """
    context: Context = field(repr=False)
    transport: Transport = field(repr=False, compare=False)

    response_model: ClassVar[Any] = None

    def to_wire(self) -> WireRequest:
        """Subclasses implement: map the request fields to a ``WireRequest``."""
        raise NotImplementedError

    def send(self) -> Any:
        """Encode, perform the HTTP call and decode the response."""
        wire = encode(self)
        payload = invoke(self.context, wire, self.transport)
        return self.parse(payload, wire)

    def parse(self, payload: Any, wire: WireRequest) -> Any:
        return decode_model(self.response_model, payload, wire.path)


class RequestBuilder:
    """Mutable accumulator for one operation's parameters.

    Subclasses declare:
        request_class: the frozen Request dataclass to build
        required: parameter names that must be set before finalize
        list_params: parameter names that accumulate into lists
    """
    request_class: ClassVar[Type[Request]] = Request
    required: ClassVar[Tuple[str, ...]] = ()
    list_params: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, context: Context, transport: Transport, **fixed: Any):
        self._context = context
        self._transport = transport
        self._values: Dict[str, Any] = dict(fixed)
        self._lists: Dict[str, List[str]] = {name: [] for name in self.list_params}
        self._errors: Dict[str, str] = {}

    def __repr__(self) -> str:
        names = sorted(self._values) + sorted(name for name, values in self._lists.items() if values)
        return f"{type(self).__name__}({', '.join(names)})"

    # ── accumulation ───────────────────────────────────────────────────────
    def _set(self: B, name: str, value: Any) -> B:
        self._values[name] = value
        self._errors.pop(name, None)
        return self

    def _reject(self: B, name: str, message: str) -> B:
        self._values.pop(name, None)
        self._errors[name] = message
        return self

    def _set_str(self: B, name: str, value: Any) -> B:
        if not isinstance(value, str):
            return self._reject(name, f"{name} must be a string, got {type(value).__name__}")
        return self._set(name, value)

    def _set_bool(self: B, name: str, value: Any) -> B:
        if not isinstance(value, bool):
            return self._reject(name, f"{name} must be a boolean, got {type(value).__name__}")
        return self._set(name, value)

    def _set_uint(self: B, name: str, value: Any) -> B:
        # bool is an int subclass but never a valid page number
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return self._reject(name, f"{name} must be a non-negative integer, got {value!r}")
        return self._set(name, value)

    def _set_enum(self: B, name: str, enum_type: Type[Enum], value: Any) -> B:
        try:
            return self._set(name, enum_type(value))
        except ValueError:
            allowed = ", ".join(str(member.value) for member in enum_type)
            return self._reject(name, f"{name} must be one of: {allowed}; got {value!r}")

    def _append(self: B, name: str, values: Iterable[Any]) -> B:
        try:
            items = list_values(values)
        except TypeError:
            return self._reject(name, f"{name} must be an iterable of strings, got {type(values).__name__}")
        bad = [item for item in items if not isinstance(item, str)]
        if bad:
            # Appends accumulate, so a rejected element stays rejected
            return self._reject(name, f"{name} values must be strings, got {bad[0]!r}")
        self._lists[name].extend(items)
        return self

    # ── finalize / send ────────────────────────────────────────────────────
    def _validate(self, values: Dict[str, Any]) -> None:
        """Hook for cross-field rules; raise ValidationError to reject."""

    def finalize(self) -> Request:
        """Validate the accumulated parameters and freeze them into a Request.

        Raises:
            ValidationError: If a required parameter is absent or a setter
                received a value of the wrong type
        """
        if self._errors:
            raise ValidationError("; ".join(self._errors[name] for name in sorted(self._errors)))

        missing = [name for name in self.required if self._values.get(name) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required parameter(s): {', '.join(missing)}")

        values = dict(self._values)
        values.update({name: tuple(items) for name, items in self._lists.items()})
        self._validate(values)

        known = {f.name for f in dataclasses.fields(self.request_class)}
        return self.request_class(
            context=self._context,
            transport=self._transport,
            **{name: value for name, value in values.items() if name in known},
        )

    def send(self) -> Any:
        """Finalize the builder and send the request."""
        return self.finalize().send()
