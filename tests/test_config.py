import pytest

from pokerrank.poker.config import DEFAULT_LABELS, RunConfig


def test_defaults():
    cfg = RunConfig()
    assert cfg.on_error == "abort"
    assert cfg.log_level == "WARNING"
    assert cfg.labels == DEFAULT_LABELS


def test_from_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("on_error: skip\nlog_level: info\nlabels: [Alice, Bob]\n")
    cfg = RunConfig.from_yaml(str(path))
    assert cfg == RunConfig(on_error="skip", log_level="INFO", labels=("Alice", "Bob"))


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("")
    assert RunConfig.from_yaml(str(path)) == RunConfig()


@pytest.mark.parametrize(
    "text",
    [
        "on_error: retry\n",
        "log_level: LOUD\n",
        "labels: [Solo]\n",
        "labels: 5\n",
        "labels:\n",
        "labels: AB\n",
        "labels: {Alice: 1, Bob: 2}\n",
        "on_error: [\n",
        "- not a mapping\n",
    ],
)
def test_invalid_yaml_values(tmp_path, text):
    path = tmp_path / "run.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        RunConfig.from_yaml(str(path))


def test_merged_overrides_only_given_values():
    cfg = RunConfig(on_error="skip").merged(on_error=None, log_level="DEBUG")
    assert cfg.on_error == "skip"
    assert cfg.log_level == "DEBUG"
