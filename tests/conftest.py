"""Shared test fixtures."""

import pytest

from yamlmerge.core.models import Document

SAMPLE_YAML = """\
base:
  app:
    name: shop
    replicas: 1
    ports: [80, 443]
  database:
    host: localhost
    port: 5432
    options:
      ssl: false
      pool: 5
  debug: false
staging:
  app:
    replicas: 2
  database:
    host: staging-db
prod:
  app:
    replicas: 10
    ports: [443]
  database:
    host: prod-db
    options:
      ssl: true
  monitoring:
    enabled: true
"""


@pytest.fixture
def sample_data():
    return {
        "base": {
            "app": {"name": "shop", "replicas": 1, "ports": [80, 443]},
            "database": {"host": "localhost", "port": 5432, "options": {"ssl": False, "pool": 5}},
            "debug": False,
        },
        "staging": {"app": {"replicas": 2}, "database": {"host": "staging-db"}},
        "prod": {
            "app": {"replicas": 10, "ports": [443]},
            "database": {"host": "prod-db", "options": {"ssl": True}},
            "monitoring": {"enabled": True},
        },
    }


@pytest.fixture
def sample_document(sample_data):
    return Document.from_python(sample_data)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    return path
