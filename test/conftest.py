import os
import pytest
from typing import Dict, Any

# =============================================================================
# Shipped Config Fixtures
# =============================================================================
# These fixtures load the configuration file installed with the package,
# ensuring tests validate the same defaults users get.


def _config_path() -> str:
    test_dir = os.path.dirname(__file__)
    pkg_root = os.path.dirname(test_dir)
    return os.path.join(pkg_root, "config", "rot3_manifold_base.yaml")


@pytest.fixture
def base_config_path() -> str:
    """Path to the shipped base YAML config."""
    path = _config_path()
    if not os.path.exists(path):
        pytest.skip("rot3_manifold_base.yaml not found")
    return path


@pytest.fixture
def base_config_dict(base_config_path) -> Dict[str, Any]:
    """Raw mapping from the shipped base YAML config (unwrapped)."""
    import yaml
    with open(base_config_path) as f:
        data = yaml.safe_load(f) or {}
    return data.get("rot3_manifold", data)


# =============================================================================
# Test Utility Fixtures
# =============================================================================

@pytest.fixture
def numpy_seed():
    """Set numpy random seed for reproducible tests."""
    import numpy as np
    np.random.seed(42)
    yield


@pytest.fixture
def random_rotations():
    """A reproducible batch of rotations spread over SO(3)."""
    import numpy as np
    from rot3_manifold import Rot3
    np.random.seed(42)
    return [Rot3.rodrigues(np.random.randn(3)) for _ in range(10)]


@pytest.fixture
def random_rotation(random_rotations):
    """A single generic rotation."""
    return random_rotations[0]


@pytest.fixture
def small_omegas():
    """Tangent vectors well inside every chart's domain (|omega| <= 0.5)."""
    import numpy as np
    np.random.seed(7)
    omegas = []
    for _ in range(10):
        v = np.random.randn(3)
        omegas.append(v / np.linalg.norm(v) * np.random.uniform(1e-3, 0.5))
    return omegas


@pytest.fixture
def random_point():
    """A 3D point."""
    import numpy as np
    return np.array([0.3, -1.2, 2.5])
