"""Comment discovery use case."""

from enum import Enum
from uuid import UUID

from engage.application.usecase.common import (
    CommentPageResponse,
    PageParams,
    ViewerRequest,
)
from engage.domain.error import ValidationError
from engage.domain.service import DiscoveryService
from engage.domain.value import ActorId


class DiscoveryFacet(str, Enum):
    """What a discovery query matches on."""

    TEXT = "text"
    HASHTAG = "hashtag"
    CULTURAL_TAG = "cultural_tag"
    COHORT = "cohort"
    AUTHOR = "author"


class DiscoverCommentsRequest(ViewerRequest, PageParams):
    """Discovery request."""

    facet: DiscoveryFacet
    value: str  # Query text, hashtag, tag, cohort level or author ID


class DiscoverCommentsUseCase:
    """Use case for finding comments by text, tag, cohort or author."""

    def __init__(self, discovery_service: DiscoveryService) -> None:
        """Initialize discover comments use case.

        Args:
            discovery_service: Discovery domain service
        """
        self.discovery_service = discovery_service

    async def execute(self, request: DiscoverCommentsRequest) -> CommentPageResponse:
        """Execute discovery flow.

        Args:
            request: Facet, value, paging and ordering

        Returns:
            One page of matching comments visible to the viewer

        Raises:
            ValidationError: If the value is not valid for the facet
        """
        viewer = request.viewer()
        page_request = request.page_request()
        service = self.discovery_service

        if request.facet == DiscoveryFacet.TEXT:
            page = await service.search(request.value, page_request, viewer, request.sort)
        elif request.facet == DiscoveryFacet.HASHTAG:
            page = await service.by_hashtag(
                request.value, page_request, viewer, request.sort
            )
        elif request.facet == DiscoveryFacet.CULTURAL_TAG:
            page = await service.by_cultural_tag(
                request.value, page_request, viewer, request.sort
            )
        elif request.facet == DiscoveryFacet.COHORT:
            page = await service.by_cohort(
                self._cohort_level(request.value), page_request, viewer, request.sort
            )
        else:  # DiscoveryFacet.AUTHOR
            page = await service.by_author(
                ActorId(UUID(request.value)), page_request, viewer, request.sort
            )

        return CommentPageResponse.from_page(page, viewer)

    @staticmethod
    def _cohort_level(value: str) -> int:
        try:
            return int(value)
        except ValueError as e:
            raise ValidationError(
                "Cohort level must be an integer", field="cohort_level"
            ) from e
