"""Unit tests for the folder service layer."""

from unittest.mock import Mock
from uuid import UUID, uuid4

import pytest

from folder_store.errors.pagination import (
    InvalidPageSizeError, InvalidTokenError, StaleTokenError, RecordSourceError
)
from folder_store.models.folders import (
    NIL_ORG_ID, Folder, FetchFolderRequest, FetchFolderResponse,
    FolderPaginationRequest, PaginatedFolderResponse
)
from folder_store.pagination.tokens import Base64TokenCodec, JsonTokenCodec
from folder_store.services.folders import FolderService, fetch_all_folders_by_org_id
from folder_store.sources import InMemoryRecordSource
from folder_store.sources.sample_data import DEFAULT_ORG_ID, SINGLE_FOLDER_ORG_ID


UNKNOWN_ORG_ID = UUID("11111111-2222-4333-8444-555555555555")


def paginate_all(service, org_id, per_page):
    """Follow tokens until exhausted; return the pages."""
    pages = []
    token = ""
    while True:
        page = service.get_paginated_folders(
            FolderPaginationRequest(org_id=org_id, per_page=per_page, token=token)
        )
        pages.append(page)
        token = page.token
        if not token:
            return pages


class TestFetchAll:
    """Test the full-fetch operation."""

    def test_single_folder_org(self, folder_service):
        """Test an organization with one folder."""
        response = folder_service.get_all_folders(FetchFolderRequest(org_id=SINGLE_FOLDER_ORG_ID))

        assert isinstance(response, FetchFolderResponse)
        assert len(response.folders) == 1
        assert response.folders[0].org_id == SINGLE_FOLDER_ORG_ID

    def test_multiple_folders_org(self, folder_service):
        """Test an organization with many folders."""
        response = folder_service.get_all_folders(FetchFolderRequest(org_id=DEFAULT_ORG_ID))

        assert len(response.folders) == 666
        assert all(f.org_id == DEFAULT_ORG_ID for f in response.folders)

    def test_preserves_source_order(self, folder_service, sample_folders):
        """Test folders come back in source order."""
        response = folder_service.get_all_folders(FetchFolderRequest(org_id=DEFAULT_ORG_ID))

        expected = [f for f in sample_folders if f.org_id == DEFAULT_ORG_ID]
        assert response.folders == expected

    def test_unknown_org(self, folder_service):
        """Test an organization without folders."""
        response = folder_service.get_all_folders(FetchFolderRequest(org_id=UNKNOWN_ORG_ID))
        assert response.folders == []

    def test_random_org(self, folder_service):
        """Test a freshly generated organization ID."""
        response = folder_service.get_all_folders(FetchFolderRequest(org_id=uuid4()))
        assert response.folders == []

    @pytest.mark.parametrize("org_id", [None, NIL_ORG_ID])
    def test_nil_org(self, org_id):
        """Test a missing or nil org yields an empty result without a lookup."""
        source = Mock()
        service = FolderService(source)

        response = service.get_all_folders(FetchFolderRequest(org_id=org_id))

        assert response.folders == []
        source.fetch_by_org.assert_not_called()

    def test_includes_deleted_folders(self, folder_service, sample_folders):
        """Test folders flagged as deleted are still returned."""
        response = folder_service.get_all_folders(FetchFolderRequest(org_id=DEFAULT_ORG_ID))

        deleted = [f for f in sample_folders if f.org_id == DEFAULT_ORG_ID and f.deleted]
        assert deleted
        assert all(f in response.folders for f in deleted)

    def test_fetch_all_helper(self, memory_source):
        """Test the module-level full-fetch helper."""
        folders = fetch_all_folders_by_org_id(memory_source, SINGLE_FOLDER_ORG_ID)
        assert len(folders) == 1

    def test_source_errors_propagate(self):
        """Test record source errors are not wrapped."""
        error = RecordSourceError("db down")
        source = Mock()
        source.fetch_by_org.side_effect = error

        with pytest.raises(RecordSourceError) as exc_info:
            FolderService(source).get_all_folders(FetchFolderRequest(org_id=DEFAULT_ORG_ID))

        assert exc_info.value is error


class TestFetchPaginated:
    """Test the paginated fetch operation."""

    def test_single_folder_single_page(self, folder_service):
        """Test one folder with one per page fits a single terminal page."""
        page = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=SINGLE_FOLDER_ORG_ID, per_page=1, token="")
        )

        assert isinstance(page, PaginatedFolderResponse)
        assert len(page.folders) == 1
        assert page.token == ""
        assert page.has_more is False

    def test_first_page(self, folder_service):
        """Test the first page of a large organization."""
        page = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=5)
        )

        assert len(page.folders) == 5
        assert page.token != ""
        assert page.has_more is True

    def test_second_page(self, folder_service):
        """Test the second page continues after the first."""
        all_folders = folder_service.get_all_folders(FetchFolderRequest(org_id=DEFAULT_ORG_ID)).folders

        first = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=5)
        )
        second = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=5, token=first.token)
        )

        assert first.folders == all_folders[:5]
        assert second.folders == all_folders[5:10]

    def test_iterate_all_pages(self, folder_service):
        """Test iterating 20 per page collects all 666 folders."""
        pages = paginate_all(folder_service, DEFAULT_ORG_ID, 20)
        collected = [f for p in pages for f in p.folders]

        assert len(collected) == 666
        assert len(pages) == 34
        assert len(pages[-1].folders) == 6

    @pytest.mark.parametrize("per_page", [1, 7, 20, 333, 665, 666, 667])
    def test_pages_match_full_fetch(self, folder_service, per_page):
        """Test paginated iteration reconstructs the full fetch exactly."""
        expected = folder_service.get_all_folders(FetchFolderRequest(org_id=DEFAULT_ORG_ID)).folders

        pages = paginate_all(folder_service, DEFAULT_ORG_ID, per_page)
        collected = [f for p in pages for f in p.folders]

        assert collected == expected
        assert len({f.id for f in collected}) == len(collected)
        for page in pages[:-1]:
            assert len(page.folders) == per_page
            assert page.token != ""
        assert pages[-1].token == ""

    def test_page_larger_than_org(self, folder_service):
        """Test one large page returns every folder with no token."""
        page = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=1000)
        )

        assert len(page.folders) == 666
        assert page.token == ""

    def test_unknown_org(self, folder_service):
        """Test an organization without folders gives an empty page."""
        page = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=UNKNOWN_ORG_ID, per_page=1)
        )

        assert page.folders == []
        assert page.token == ""

    @pytest.mark.parametrize("org_id", [None, NIL_ORG_ID])
    def test_nil_org(self, folder_service, org_id):
        """Test a missing or nil org gives an empty page, not an error."""
        page = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=org_id, per_page=10)
        )

        assert page.folders == []
        assert page.token == ""

    def test_stale_token(self, folder_service):
        """Test a decodable token for an absent folder raises StaleTokenError."""
        token = Base64TokenCodec().encode(str(uuid4()))

        with pytest.raises(StaleTokenError):
            folder_service.get_paginated_folders(
                FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=10, token=token)
            )

    def test_token_from_other_org(self, folder_service, sample_folders):
        """Test a token minted for another organization is stale."""
        other = next(f for f in sample_folders if f.org_id != DEFAULT_ORG_ID)
        token = Base64TokenCodec().encode(str(other.id))

        with pytest.raises(StaleTokenError):
            folder_service.get_paginated_folders(
                FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=10, token=token)
            )

    def test_invalid_token(self, folder_service):
        """Test a malformed token raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            folder_service.get_paginated_folders(
                FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=10, token="%%%")
            )

    @pytest.mark.parametrize("per_page", [0, -5])
    def test_invalid_page_size(self, folder_service, per_page):
        """Test non-positive page sizes are rejected."""
        with pytest.raises(InvalidPageSizeError):
            folder_service.get_paginated_folders(
                FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=per_page)
            )

    def test_invalid_page_size_for_nil_org(self, folder_service):
        """Test page size is validated even when the org is nil."""
        with pytest.raises(InvalidPageSizeError):
            folder_service.get_paginated_folders(
                FolderPaginationRequest(org_id=None, per_page=0)
            )

    def test_max_page_size(self, memory_source):
        """Test the configured upper bound on page size."""
        service = FolderService(memory_source, max_page_size=100)

        page = service.get_paginated_folders(
            FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=100)
        )
        assert len(page.folders) == 100

        with pytest.raises(InvalidPageSizeError, match="must not exceed 100"):
            service.get_paginated_folders(
                FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=101)
            )

    def test_deterministic(self, folder_service):
        """Test repeated identical requests return identical pages."""
        first = folder_service.get_paginated_folders(
            FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=25)
        )
        request = FolderPaginationRequest(org_id=DEFAULT_ORG_ID, per_page=25, token=first.token)

        assert folder_service.get_paginated_folders(request) == folder_service.get_paginated_folders(request)

    def test_json_codec(self, memory_source):
        """Test the service with the JSON token format."""
        service = FolderService(memory_source, codec=JsonTokenCodec())

        pages = paginate_all(service, DEFAULT_ORG_ID, 100)

        assert sum(len(p.folders) for p in pages) == 666

    def test_source_changed_between_pages(self):
        """Test removing the cursor folder mid-iteration surfaces as stale."""
        org_id = uuid4()
        folders = [Folder(id=uuid4(), name=f"f{i}", org_id=org_id) for i in range(4)]
        service = FolderService(InMemoryRecordSource(folders))

        first = service.get_paginated_folders(FolderPaginationRequest(org_id=org_id, per_page=2))

        service_after_change = FolderService(InMemoryRecordSource(folders[:1] + folders[2:]))
        with pytest.raises(StaleTokenError):
            service_after_change.get_paginated_folders(
                FolderPaginationRequest(org_id=org_id, per_page=2, token=first.token)
            )
