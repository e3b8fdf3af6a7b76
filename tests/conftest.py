# -*- coding: utf-8 -*-

import pytest

from ocidigest import Algorithm


@pytest.fixture(params=list(Algorithm), ids=str)
def algorithm(request):
    return request.param
