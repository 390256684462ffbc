"""Integration tests for end-to-end workflows."""

import logging

from signquote.cli.main import cli


def _extract_id(output):
    """Extract the ID from output like "Created budget 'X' (ID: 1)"."""
    for line in output.split("\n"):
        if "ID:" in line:
            return line.split("ID:")[1].strip().rstrip(")")
    return None


def test_full_workflow(cli_runner, temp_db):
    """Test complete workflow: project → budget → items → show → terms → status."""
    db_args = ["--db-path", temp_db.database_path]

    # Step 1: Create project
    result = cli_runner.invoke(
        cli, db_args + ["project", "create", "Fachada Shopping", "--client", "Corporación ABC"]
    )
    assert result.exit_code == 0

    # Step 2: Create budget
    result = cli_runner.invoke(
        cli,
        db_args
        + [
            "budget",
            "create",
            "Fachada v1",
            "--project",
            "Fachada Shopping",
            "--client",
            "Corporación ABC",
            "--issue-date",
            "2023-05-15",
        ],
    )
    assert result.exit_code == 0
    budget_id = _extract_id(result.output)
    assert budget_id is not None

    # Step 3: Add the sign and the letters
    items = [
        ["--description", "Cartel Corporativo", "--category", "cartel", "--faces", "2",
         "--height", "200", "--width", "300", "--price", "5.000.000"],
        ["--description", "Letras Corpóreas", "--category", "corporeo",
         "--height", "50", "--width", "400", "--qty", "10", "--price", "800000",
         "--discount", "5%"],
    ]
    for options in items:
        result = cli_runner.invoke(cli, db_args + ["item", "add", budget_id] + options)
        assert result.exit_code == 0

    # Step 4: Show totals
    result = cli_runner.invoke(cli, db_args + ["budget", "show", budget_id])
    assert result.exit_code == 0
    assert "Gs. 12.600.000" in result.output
    assert "Gs. 13.860.000" in result.output

    # Step 5: Apply a document discount
    result = cli_runner.invoke(
        cli, db_args + ["budget", "terms", budget_id, "--discount", "860,000", "--iva", "10%"]
    )
    assert result.exit_code == 0

    # Step 6: Approve and list
    result = cli_runner.invoke(cli, db_args + ["budget", "status", budget_id, "approved"])
    assert result.exit_code == 0

    result = cli_runner.invoke(cli, db_args + ["budget", "list"])
    assert result.exit_code == 0
    assert "approved" in result.output
    assert "Gs. 13.000.000" in result.output


def test_negative_total_is_logged(cli_runner, temp_db, sample_budget, sample_items, caplog):
    """Test that a discount larger than the lines still shows, with a warning."""
    args = [
        "--db-path",
        temp_db.database_path,
        "budget",
        "terms",
        str(sample_budget.id),
        "--discount",
        "20.000.000",
    ]
    with caplog.at_level(logging.WARNING, logger="signquote.domain.aggregate"):
        result = cli_runner.invoke(cli, args)

    assert result.exit_code == 0
    assert "-Gs. 6.140.000" in result.output
    assert "negative" in caplog.text
