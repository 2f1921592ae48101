import sys

import pytest

# Decoders raise the interpreter recursion limit while they force deferred
# chains and must put it back afterwards. This autouse fixture checks that
# every test module leaves the limit exactly as it found it. It is
# module-scoped so hypothesis-driven tests do not trip the
# function-scoped-fixture health check.


@pytest.fixture(scope="module", autouse=True)
def _recursion_limit_restored():
    before = sys.getrecursionlimit()
    yield
    assert sys.getrecursionlimit() == before


@pytest.fixture
def decode():
    """Church-decode helper returning a plain int."""
    from lambda_expression.codec.church import church_decode
    return church_decode


@pytest.fixture
def num():
    """Church-encode helper."""
    from lambda_expression.codec.church import church_encode
    return church_encode
