"""Tests for container assembly."""

import pytest

from hub.adapter.email import EmailSender, MockEmailSender
from hub.util.di.container import build_container, mockable_components
from tests.di import build_test_container


def test_swappable_components():
    assert mockable_components() == {"persistence", "storage", "email"}


def test_unknown_component_rejected():
    with pytest.raises(ValueError, match="Unknown components"):
        build_container(mocked={"cache"})

    with pytest.raises(ValueError, match="Unknown components"):
        build_test_container(unmock={"cache"})


@pytest.mark.asyncio
async def test_test_container_uses_fakes():
    container = build_test_container()

    sender = await container.get(EmailSender)

    assert isinstance(sender, MockEmailSender)
    await container.close()
