"""End-to-end tests for the command-line interface."""

import pandas as pd
import pytest

from plantao.cli import main


@pytest.fixture
def inputs(tmp_path):
    staff = tmp_path / "staff.csv"
    staff.write_text("id,name\n1,Ana\n2,Bruno\n3,Carla\n")
    vacations = tmp_path / "vacations.csv"
    vacations.write_text("staff_id,start_date,end_date\n1,2024-03-01,2024-03-10\n")
    holidays = tmp_path / "holidays.csv"
    holidays.write_text("date,name,type\n2024-03-29,Sexta-feira Santa,national\n")
    return {"staff": staff, "vacations": vacations, "holidays": holidays, "dir": tmp_path}


def test_generate_validate_summarize(inputs, capsys):
    out = inputs["dir"] / "march.csv"
    main([
        "generate", "--year", "2024", "--month", "3", "--seed", "5",
        "--staff", str(inputs["staff"]), "--vacations", str(inputs["vacations"]),
        "--holidays", str(inputs["holidays"]), "--out", str(out),
    ])
    df = pd.read_csv(out, dtype=str)
    assert len(df) == 31
    friday = df[df["date"] == "2024-03-29"].iloc[0]
    saturday = df[df["date"] == "2024-03-30"].iloc[0]
    assert friday["staff_id"] == saturday["staff_id"]
    early = df[(df["date"] <= "2024-03-10") & df["staff_id"].notna()]
    assert "1" not in set(early["staff_id"])

    main([
        "validate", "--calendar", str(out), "--staff", str(inputs["staff"]),
        "--vacations", str(inputs["vacations"]), "--holidays", str(inputs["holidays"]),
    ])
    main(["summarize", "--calendar", str(out), "--staff", str(inputs["staff"])])
    captured = capsys.readouterr().out
    assert "[OK] Validation passed." in captured
    assert "Shifts per staff member:" in captured


def test_generate_several_months(inputs):
    out = inputs["dir"] / "cal.csv"
    main([
        "generate", "--year", "2024", "--month", "1", "--end-month", "3",
        "--staff", str(inputs["staff"]), "--out", str(out),
    ])
    for name, rows in (("cal_2024-01.csv", 31), ("cal_2024-02.csv", 29), ("cal_2024-03.csv", 31)):
        assert len(pd.read_csv(inputs["dir"] / name)) == rows


def test_generate_from_database(inputs):
    db_url = f"sqlite:///{inputs['dir'] / 'plantao.db'}"
    main(["init-db", "--db", db_url])
    main([
        "import-csv", "--db", db_url, "--staff", str(inputs["staff"]),
        "--vacations", str(inputs["vacations"]), "--holidays", str(inputs["holidays"]),
    ])
    out = inputs["dir"] / "db.csv"
    main(["generate", "--year", "2024", "--month", "3", "--db", db_url, "--out", str(out)])
    df = pd.read_csv(out, dtype=str)
    assert df[df["date"] == "2024-03-29"].iloc[0]["staff_id"] in {"1", "2", "3"}


def test_bad_month_exits(inputs):
    with pytest.raises(SystemExit):
        main([
            "generate", "--year", "2024", "--month", "13",
            "--staff", str(inputs["staff"]), "--out", str(inputs["dir"] / "x.csv"),
        ])


def test_generate_requires_roster_source(inputs):
    with pytest.raises(SystemExit):
        main(["generate", "--year", "2024", "--month", "3", "--out", str(inputs["dir"] / "x.csv")])


def test_failed_import_leaves_database_empty(inputs):
    db_url = f"sqlite:///{inputs['dir'] / 'plantao.db'}"
    main(["init-db", "--db", db_url])
    bad = inputs["dir"] / "bad_vacations.csv"
    bad.write_text("staff_id,start_date,end_date\n1,2024-03-01,2024-03-10\n99,2024-03-01,2024-03-10\n")
    with pytest.raises(ValueError):
        main(["import-csv", "--db", db_url, "--staff", str(inputs["staff"]), "--vacations", str(bad)])

    from plantao.domain.db import get_session
    from plantao.domain.repositories import StaffRepository, VacationRepository

    session = get_session(db_url)
    try:
        assert StaffRepository.get_all(session) == []
        assert VacationRepository.get_by_staff(session, "1") == []
    finally:
        session.close()
