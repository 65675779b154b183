import os

from clinical_concepts_api.app.core.config import Settings
from clinical_concepts_api.app.core.db import get_database_path


def test_cors_origin_list_splits_and_strips():
    settings = Settings(cors_origins="http://a.example, http://b.example ,")

    assert settings.cors_origin_list == ["http://a.example", "http://b.example"]


def test_default_cors_allows_any_origin():
    assert Settings(cors_origins="*").cors_origin_list == ["*"]


def test_absolute_database_path_is_kept(tmp_path):
    path = str(tmp_path / "x.db")

    assert get_database_path(path) == path


def test_relative_database_path_resolves_to_project_root():
    path = get_database_path("concepts.db")

    assert os.path.isabs(path)
    assert path.endswith(os.path.join("clinical_concepts_api", "concepts.db"))
