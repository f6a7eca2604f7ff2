"""
Basic package tests to ensure fast-entity can be imported and basic functionality works.
"""

import fast_entity


def test_package_version():
    """Test that package version is accessible."""
    assert hasattr(fast_entity, '__version__')
    assert fast_entity.__version__ == "0.1.0"


def test_package_metadata():
    """Test that all expected metadata is present."""
    assert hasattr(fast_entity, '__author__')
    assert hasattr(fast_entity, '__email__')
    assert hasattr(fast_entity, '__license__')
    assert hasattr(fast_entity, '__url__')

    assert fast_entity.__license__ == "MIT"


def test_public_exports():
    for name in ("EntityValidator", "RuleChain", "Lookup", "MongoLookup", "UniquenessViolationException", "boot"):
        assert hasattr(fast_entity, name), name
