"""Wire payloads exchanged between the control surface and the scanning agent.

Every payload is ``{"message": <tag>, "data": {...}}`` with camelCase keys.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from refinder.messaging.exceptions import MessageFormatError


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SearchForTermsData(WireModel):
    search_pattern: str
    flags: str = ""
    capture_group_index: int = Field(default=0, ge=0)


class FindOnPageData(WireModel):
    term: str


class ActivateDocumentData(WireModel):
    url: str = Field(min_length=1)


class EmptyData(WireModel):
    pass


class FoundTermsData(WireModel):
    url: str
    found_terms: list[str] = Field(default_factory=list)
    total_found_terms_count: int = 0
    truncated: bool = False


class InvalidPatternData(WireModel):
    search_pattern: str
    flags: str = ""
    reason: str


class FoundOnPageData(WireModel):
    url: str
    term: str
    offsets: list[int] = Field(default_factory=list)


class SavedPatternData(WireModel):
    pattern: SearchForTermsData | None = None


# Requests


class SearchForTermsRequest(WireModel):
    message: Literal["SEARCH_FOR_TERMS"] = "SEARCH_FOR_TERMS"
    data: SearchForTermsData


class FindOnPageRequest(WireModel):
    message: Literal["FIND_ON_PAGE"] = "FIND_ON_PAGE"
    data: FindOnPageData


class ActivateDocumentRequest(WireModel):
    message: Literal["ACTIVATE_DOCUMENT"] = "ACTIVATE_DOCUMENT"
    data: ActivateDocumentData


class GetSavedPatternRequest(WireModel):
    message: Literal["GET_SAVED_PATTERN"] = "GET_SAVED_PATTERN"
    data: EmptyData = Field(default_factory=EmptyData)


# Responses


class FoundTermsResponse(WireModel):
    message: Literal["FOUND_TERMS"] = "FOUND_TERMS"
    data: FoundTermsData


class InvalidPatternResponse(WireModel):
    message: Literal["INVALID_PATTERN"] = "INVALID_PATTERN"
    data: InvalidPatternData


class FoundOnPageResponse(WireModel):
    message: Literal["FOUND_ON_PAGE"] = "FOUND_ON_PAGE"
    data: FoundOnPageData


class SavedPatternResponse(WireModel):
    message: Literal["SAVED_PATTERN"] = "SAVED_PATTERN"
    data: SavedPatternData = Field(default_factory=SavedPatternData)


Request = Annotated[
    SearchForTermsRequest
    | FindOnPageRequest
    | ActivateDocumentRequest
    | GetSavedPatternRequest,
    Field(discriminator="message"),
]

Response = Annotated[
    FoundTermsResponse
    | InvalidPatternResponse
    | FoundOnPageResponse
    | SavedPatternResponse,
    Field(discriminator="message"),
]

_REQUEST_ADAPTER = TypeAdapter(Request)
_RESPONSE_ADAPTER = TypeAdapter(Response)


def parse_request(payload: Any) -> Request:
    """Validate a raw payload into one of the request variants.

    Raises:
        MessageFormatError: if the payload matches no request variant.
    """
    try:
        return _REQUEST_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise MessageFormatError(f"Invalid request payload: {exc}") from exc


def parse_response(payload: Any) -> Response:
    """Validate a raw payload into one of the response variants.

    Raises:
        MessageFormatError: if the payload matches no response variant.
    """
    try:
        return _RESPONSE_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise MessageFormatError(f"Invalid response payload: {exc}") from exc
