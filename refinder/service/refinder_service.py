from refinder.cache.pattern_store import PatternStore
from refinder.cache.result_cache import ResultCache
from refinder.config.settings import Settings
from refinder.documents.loader import DocumentLoader, build_document_loader
from refinder.documents.models import Document
from refinder.extraction.exceptions import InvalidPatternError
from refinder.extraction.extractor import Extractor
from refinder.extraction.locator import locate_term
from refinder.extraction.models import PatternSpec
from refinder.logging.logger import Log
from refinder.messaging.models import (
    ActivateDocumentRequest,
    FindOnPageRequest,
    FoundOnPageData,
    FoundOnPageResponse,
    FoundTermsData,
    FoundTermsResponse,
    GetSavedPatternRequest,
    InvalidPatternData,
    InvalidPatternResponse,
    Request,
    Response,
    SavedPatternData,
    SavedPatternResponse,
    SearchForTermsRequest,
)
from refinder.service.exceptions import NoActiveDocumentError
from refinder.storage.base import BaseKeyValueStore
from refinder.storage.factory import KeyValueStoreFactory


class ReFinderService:
    """Handles requests against the active document.

    Keeps the active document and the last pattern that compiled. An invalid
    pattern is reported without touching either of them or the cached results.
    """

    def __init__(
        self,
        extractor: Extractor,
        result_cache: ResultCache,
        pattern_store: PatternStore,
        document_loader: DocumentLoader,
    ) -> None:
        self._extractor = extractor
        self._result_cache = result_cache
        self._pattern_store = pattern_store
        self._document_loader = document_loader
        self._document: Document | None = None
        self._spec: PatternSpec | None = None

    @property
    def active_document(self) -> Document | None:
        return self._document

    @property
    def active_spec(self) -> PatternSpec | None:
        return self._spec

    def handle(self, request: Request) -> Response:
        """Dispatch *request* to its handler and return the response."""
        if isinstance(request, SearchForTermsRequest):
            return self.search_for_terms(request)
        if isinstance(request, FindOnPageRequest):
            return self.find_on_page(request)
        if isinstance(request, ActivateDocumentRequest):
            return self.activate_document(request)
        if isinstance(request, GetSavedPatternRequest):
            return self.get_saved_pattern()
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    def activate_document(self, request: ActivateDocumentRequest) -> FoundTermsResponse:
        """Load a document, make it active and return its cached terms, if any."""
        url = request.data.url
        self._document = self._document_loader.load(url)
        cached = self._result_cache.get(url)
        if cached is None:
            Log.info("No cached results for document", url=url)
            return FoundTermsResponse(data=FoundTermsData(url=url))
        Log.info(f"Restored {cached.count} cached terms", url=url)
        return FoundTermsResponse(
            data=FoundTermsData(
                url=url,
                found_terms=list(cached.terms),
                total_found_terms_count=cached.count,
                truncated=cached.truncated,
            )
        )

    def search_for_terms(
        self, request: SearchForTermsRequest
    ) -> FoundTermsResponse | InvalidPatternResponse:
        """Extract terms for the requested pattern from the active document."""
        data = request.data
        self._pattern_store.save(data)
        try:
            spec = PatternSpec.from_flag_string(
                data.search_pattern, data.flags, data.capture_group_index
            )
            document = self._require_document()
            result = self._extractor.extract(document.text, spec)
        except InvalidPatternError as exc:
            Log.warning(f"Rejected pattern: {exc.reason}", source=exc.source, flags=data.flags)
            return InvalidPatternResponse(
                data=InvalidPatternData(
                    search_pattern=data.search_pattern,
                    flags=data.flags,
                    reason=exc.reason,
                )
            )

        self._spec = spec
        self._result_cache.put(document.url, result)
        Log.info(
            f"Found {result.count} terms",
            url=document.url,
            source=spec.source,
            truncated=result.truncated,
        )
        return FoundTermsResponse(
            data=FoundTermsData(
                url=document.url,
                found_terms=list(result.terms),
                total_found_terms_count=result.count,
                truncated=result.truncated,
            )
        )

    def find_on_page(self, request: FindOnPageRequest) -> FoundOnPageResponse:
        """Locate a term in the active document.

        Matching is case-sensitive only when the last valid pattern is.
        """
        document = self._require_document()
        term = request.data.term
        case_sensitive = self._spec is not None and not self._spec.ignore_case
        offsets = locate_term(
            document.text,
            term,
            case_sensitive=case_sensitive,
            limit=self._extractor.max_results,
        )
        Log.info(f"Located {len(offsets)} occurrences", url=document.url, term=term)
        return FoundOnPageResponse(
            data=FoundOnPageData(url=document.url, term=term, offsets=offsets)
        )

    def get_saved_pattern(self) -> SavedPatternResponse:
        return SavedPatternResponse(data=SavedPatternData(pattern=self._pattern_store.load()))

    def close(self) -> None:
        self._document_loader.close()

    def _require_document(self) -> Document:
        if self._document is None:
            raise NoActiveDocumentError("No active document; send ACTIVATE_DOCUMENT first")
        return self._document


def build_service(
    settings: Settings,
    store: BaseKeyValueStore | None = None,
    document_loader: DocumentLoader | None = None,
) -> ReFinderService:
    """Build a ReFinderService with all required collaborators."""
    store = store if store is not None else KeyValueStoreFactory.create(settings)
    loader = document_loader if document_loader is not None else build_document_loader(settings)
    return ReFinderService(
        extractor=Extractor(max_results=settings.max_results_limit),
        result_cache=ResultCache(store),
        pattern_store=PatternStore(store),
        document_loader=loader,
    )
