"""Unit tests for server services dependencies.

Tests verify that every ``*ServiceDep`` is an Annotated dependency building
its service on the request session.
"""

from typing import get_args
from unittest.mock import MagicMock

import pytest

from unguka.server.services import deps
from unguka.server.services.base import BaseService
from unguka.server.services.payments import PaymentService

SERVICE_DEPS = [name for name in dir(deps) if name.endswith("ServiceDep")]


class TestServiceDeps:
    def test_every_service_has_a_dependency(self):
        assert len(SERVICE_DEPS) == 16

    @pytest.mark.parametrize("name", SERVICE_DEPS)
    def test_dependency_builds_its_service(self, name):
        service_cls, depends_obj = get_args(getattr(deps, name))
        session = MagicMock()

        service = depends_obj.dependency(session=session)

        assert isinstance(service, service_cls)
        assert isinstance(service, BaseService)
        assert service.session is session

    def test_provider_is_named_after_service(self):
        provider = deps.service_provider(PaymentService)

        assert provider.__name__ == "get_PaymentService"
