import pytest


@pytest.fixture
def write_train(tmp_path):
    """Return a function that writes a spike train in CSV format and returns its path."""

    def _write_train(name, times):
        path = tmp_path / name
        lines = ["times", *[str(t) for t in times]]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write_train


@pytest.fixture
def van_rossum_config_dict():
    return {
        "version": 1,
        "trains": {"first": "train1.csv", "second": "train2.csv"},
        "metric": {"type": "van_rossum", "tau": 2.0, "method": "direct"},
    }


@pytest.fixture
def spike_config_dict():
    return {
        "version": 1,
        "trains": {"first": "train1.csv", "second": "train2.csv"},
        "metric": {"type": "spike", "tf": 3.0},
        "output": "profile.csv",
    }
