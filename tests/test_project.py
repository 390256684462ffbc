"""Tests for project commands."""

from signquote.cli.main import cli


def _invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_project_create(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "project", "create", "Fachada Shopping", "--client", "Corporación ABC"
    )

    assert result.exit_code == 0
    assert "Created project 'Fachada Shopping'" in result.output
    assert "ID:" in result.output


def test_project_create_duplicate(cli_runner, temp_db, sample_project):
    result = _invoke(cli_runner, temp_db, "project", "create", "Fachada Shopping")

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_project_create_bad_date(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "project", "create", "Totem", "--start-date", "someday"
    )

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_project_list_empty(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "project", "list")

    assert result.exit_code == 0
    assert "No projects found" in result.output


def test_project_list_with_data(cli_runner, temp_db, sample_project):
    result = _invoke(cli_runner, temp_db, "project", "list")

    assert result.exit_code == 0
    assert "Fachada Shopping" in result.output
    assert "Corporación ABC" in result.output
    assert "draft" in result.output


def test_project_status(cli_runner, temp_db, project_service, sample_project):
    result = _invoke(cli_runner, temp_db, "project", "status", "Fachada Shopping", "active")

    assert result.exit_code == 0
    assert f"Project {sample_project.id} is now active" in result.output
    assert project_service.get_project(sample_project.id).status.value == "active"


def test_project_status_unknown_project(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "project", "status", "Nope", "active")

    assert result.exit_code == 1
    assert "Project 'Nope' not found" in result.output


def test_project_delete(cli_runner, temp_db, project_service, sample_project):
    result = _invoke(
        cli_runner, temp_db, "project", "delete", str(sample_project.id), input="y\n"
    )

    assert result.exit_code == 0
    assert "Deleted project 'Fachada Shopping'" in result.output
    assert project_service.get_project(sample_project.id) is None


def test_project_delete_cancelled(cli_runner, temp_db, project_service, sample_project):
    result = _invoke(
        cli_runner, temp_db, "project", "delete", "Fachada Shopping", input="n\n"
    )

    assert result.exit_code == 0
    assert "Deletion cancelled." in result.output
    assert project_service.get_project(sample_project.id) is not None


def test_project_delete_with_budgets(cli_runner, temp_db, sample_budget):
    result = _invoke(
        cli_runner, temp_db, "project", "delete", "Fachada Shopping", input="y\n"
    )

    assert result.exit_code == 1
    assert "Cannot delete project" in result.output
