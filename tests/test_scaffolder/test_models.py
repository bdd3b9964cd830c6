"""Tests for the scaffolder models (express_start.scaffolder.models).

Covers:
- Answers defaults and enum coercion
- Project name validation
- Immutability and with_project_name
- PackageDescriptor.to_manifest key handling
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from express_start.scaffolder.models import (
    Answers,
    Auth,
    Language,
    Orm,
    PackageDescriptor,
    Scripts,
    Validator,
)


pytestmark = pytest.mark.unit


class TestAnswers:
    def test_defaults(self):
        answers = Answers(project_name="api")
        assert answers.language is Language.JAVASCRIPT
        assert answers.orm is Orm.NONE
        assert answers.auth is Auth.NONE
        assert answers.validator is Validator.NONE
        assert answers.logger is True
        assert answers.parser is True
        assert answers.extend_prototypes is False

    def test_coerces_enum_values(self):
        answers = Answers(project_name="api", language="TypeScript", orm="Sequelize", auth="Session")
        assert answers.language is Language.TYPESCRIPT
        assert answers.orm is Orm.SEQUELIZE
        assert answers.auth is Auth.SESSION

    def test_rejects_unknown_choice(self):
        with pytest.raises(ValidationError):
            Answers(project_name="api", orm="Mongoose")

    def test_source_ext(self):
        assert Answers(project_name="a").source_ext == "js"
        assert Answers(project_name="a", language="TypeScript").source_ext == "ts"
        assert Answers(project_name="a", language="TypeScript").is_typescript

    def test_name_is_stripped(self):
        assert Answers(project_name="  api  ").project_name == "api"

    @pytest.mark.parametrize("bad", ["", "   ", "/", "..", "../escape"])
    def test_rejects_unsafe_names(self, bad):
        with pytest.raises(ValidationError):
            Answers(project_name=bad)

    def test_frozen(self):
        answers = Answers(project_name="api")
        with pytest.raises(ValidationError):
            answers.language = Language.TYPESCRIPT

    def test_with_project_name_keeps_choices(self):
        answers = Answers(project_name="api", language="TypeScript", auth="JWT")
        renamed = answers.with_project_name("api-v2")
        assert renamed.project_name == "api-v2"
        assert renamed.language is Language.TYPESCRIPT
        assert renamed.auth is Auth.JWT
        assert answers.project_name == "api"

    def test_with_project_name_validates(self):
        with pytest.raises(ValidationError):
            Answers(project_name="api").with_project_name("")


class TestPackageDescriptor:
    def _descriptor(self, module_type=None) -> PackageDescriptor:
        return PackageDescriptor(
            name="api",
            type=module_type,
            main="src/index.js",
            scripts=Scripts(start="node src/index.js", dev="nodemon src/index.js", build="echo"),
            dependencies={"express": "^4", "cors": "^2"},
            dev_dependencies={"nodemon": "^3"},
        )

    def test_type_absent_when_unset(self):
        manifest = self._descriptor().to_manifest()
        assert "type" not in manifest

    def test_type_present_when_set(self):
        manifest = self._descriptor("module").to_manifest()
        assert manifest["type"] == "module"

    def test_manifest_keys(self):
        manifest = self._descriptor().to_manifest()
        assert list(manifest) == [
            "name", "version", "main", "scripts", "dependencies", "devDependencies",
        ]
        assert manifest["version"] == "1.0.0"
        assert manifest["scripts"] == {
            "start": "node src/index.js",
            "dev": "nodemon src/index.js",
            "build": "echo",
        }

    def test_dependencies_sorted(self):
        manifest = self._descriptor().to_manifest()
        assert list(manifest["dependencies"]) == ["cors", "express"]
