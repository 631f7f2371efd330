"""Paper use cases."""

from .delete_paper import DeletePaperRequest, DeletePaperUseCase
from .download_paper import DownloadPaperRequest, DownloadPaperUseCase, PaperDownload
from .get_paper import GetPaperRequest, GetPaperUseCase
from .list_papers import ListPapersRequest, ListPapersResponse, ListPapersUseCase
from .rate_paper import RatePaperRequest, RatePaperUseCase
from .upload_paper import UploadPaperRequest, UploadPaperUseCase

__all__ = [
    "DeletePaperRequest",
    "DeletePaperUseCase",
    "DownloadPaperRequest",
    "DownloadPaperUseCase",
    "GetPaperRequest",
    "GetPaperUseCase",
    "ListPapersRequest",
    "ListPapersResponse",
    "ListPapersUseCase",
    "PaperDownload",
    "RatePaperRequest",
    "RatePaperUseCase",
    "UploadPaperRequest",
    "UploadPaperUseCase",
]
