"""Tagged transfer codec for cache values.

Every encoded value is a JSON envelope carrying a type tag next to its
payload:

    {"@type": "product", "payload": {"id": 5, "name": "Phone", "price": "800"}}

The tag lets one cache namespace hold values of more than one model. Tags
are resolved through a registry filled at startup, never by importing
classes named in the data.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from product_cache.dto import ProductDto
from product_cache.exceptions import CodecError, NullValueNotAllowedError

TYPE_FIELD = "@type"
PAYLOAD_FIELD = "payload"

ModelT = TypeVar("ModelT", bound=BaseModel)


class TransferCodec:
    """Encode and decode pydantic models to self-describing bytes.

    Example:
        ```python
        codec = TransferCodec.create()
        data = codec.encode(ProductDto(id=1, name="Laptop", price=Decimal("1200")))
        dto = codec.decode_as(data, ProductDto)
        ```
    """

    def __init__(self) -> None:
        self._models: dict[str, type[BaseModel]] = {}
        self._tags: dict[type[BaseModel], str] = {}

    @classmethod
    def create(cls) -> "TransferCodec":
        """Factory method returning a codec with the product model registered."""
        codec = cls()
        codec.register("product", ProductDto)
        return codec

    def register(self, tag: str, model: type[BaseModel]) -> None:
        """Register a model under a type tag.

        Re-registering the same pair is a no-op.

        Raises:
            CodecError: If the tag or the model is already bound to something else
        """
        existing = self._models.get(tag)
        if existing is not None and existing is not model:
            raise CodecError(f"Tag already registered for {existing.__name__}", tag=tag)

        existing_tag = self._tags.get(model)
        if existing_tag is not None and existing_tag != tag:
            raise CodecError(
                f"{model.__name__} already registered under '{existing_tag}'", tag=tag
            )

        self._models[tag] = model
        self._tags[model] = tag

    @property
    def tags(self) -> list[str]:
        """Registered type tags."""
        return sorted(self._models)

    def encode(self, value: BaseModel | None) -> bytes:
        """Serialize a registered model to envelope bytes.

        Raises:
            NullValueNotAllowedError: If value is None
            CodecError: If the value's type is not registered
        """
        if value is None:
            raise NullValueNotAllowedError()

        tag = self._tags.get(type(value))
        if tag is None:
            raise CodecError(f"No tag registered for {type(value).__name__}")

        envelope = {TYPE_FIELD: tag, PAYLOAD_FIELD: value.model_dump(mode="json")}
        return json.dumps(envelope, separators=(",", ":")).encode("utf-8")

    def decode(self, data: bytes) -> BaseModel:
        """Deserialize envelope bytes back into the registered model.

        Raises:
            CodecError: If the data is malformed, untagged, carries an unknown
                tag, or the payload does not validate
        """
        envelope = self._load_envelope(data)

        tag = envelope.get(TYPE_FIELD)
        if not isinstance(tag, str):
            raise CodecError("Missing type tag")

        model = self._models.get(tag)
        if model is None:
            raise CodecError("Unknown type tag", tag=tag)

        try:
            return model.model_validate(envelope.get(PAYLOAD_FIELD))
        except ValidationError as e:
            raise CodecError(f"Invalid payload: {e}", tag=tag) from e

    def decode_as(self, data: bytes, model: type[ModelT]) -> ModelT:
        """Decode and check the result is an instance of ``model``.

        Raises:
            CodecError: If decoding fails or yields a different type
        """
        value = self.decode(data)
        if not isinstance(value, model):
            raise CodecError(
                f"Expected {model.__name__}, got {type(value).__name__}",
                tag=self._tags.get(type(value)),
            )
        return value

    @staticmethod
    def _load_envelope(data: bytes) -> dict[str, Any]:
        try:
            envelope = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CodecError(f"Malformed cache value: {e}") from e

        if not isinstance(envelope, dict):
            raise CodecError("Cache value is not an envelope object")
        return envelope
