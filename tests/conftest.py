import pytest

from raftviz.cluster import Cluster
from raftviz.scenario import ScenarioConfig, ScenarioRunner


@pytest.fixture
def make_runner():
    def _make(cluster: Cluster) -> ScenarioRunner:
        return ScenarioRunner(cluster, ScenarioConfig(heartbeat_interval=0))
    return _make


@pytest.fixture
def cluster():
    return Cluster(5)


@pytest.fixture
def runner(cluster, make_runner):
    return make_runner(cluster)
