"""Helpers shared by the paper and comment use cases."""

from hub.domain.model import Group, Paper
from hub.domain.service import GroupService, PaperService
from hub.domain.value import PaperId, parse_id


async def load_paper(
    paper_service: PaperService, group_service: GroupService, paper_id: str
) -> tuple[Paper, Group]:
    """Load a paper and the group it belongs to.

    Raises:
        NotFoundError: If the paper or its group does not exist
    """
    paper = await paper_service.get_paper(PaperId(parse_id(paper_id)))
    group = await group_service.get_group(paper.group_id)
    return paper, group
