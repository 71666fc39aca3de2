import json

import httpx
import pandas as pd
import pytest

from plot_inventory import cli


def test_select_items_views(mock_mode):
    assert len(cli.select_items("all")) == 39
    assert len(cli.select_items("all", "2期")) == 7
    assert [i.section for i in cli.select_items("soldout")] == ["B", "2", "5", "5"]
    assert len(cli.select_items("available", "4期")) == 10


def test_select_items_sorted_views(mock_mode):
    by_rate = cli.select_items("usage-rate")
    assert by_rate[0].remaining_count == 0

    by_remaining = cli.select_items("remaining", ascending=True)
    assert by_remaining[0].remaining_count == 0
    assert by_remaining[-1].section == "るり庵Ⅱ"


def test_select_items_unknown_view():
    with pytest.raises(ValueError):
        cli.select_items("everything")


def test_audit_counts_unbalanced_rows():
    assert cli.audit_inventory() == 24


def test_main_prints_report(mock_mode, capsys):
    cli.main(["--view", "soldout", "--by-area"])

    out = capsys.readouterr().out
    assert "== Sold-out sections ==" in out
    assert out.count("SOLD OUT") == 4
    assert "== By Plot Type ==" in out


def test_main_period_title(mock_mode, capsys):
    cli.main(["--period", "3期"])

    assert "== All sections (3期) ==" in capsys.readouterr().out


def test_main_audit(mock_mode, capsys):
    cli.main(["--audit"])

    assert "Unbalanced rows: 24" in capsys.readouterr().out


def test_main_csv(mock_mode, tmp_path, capsys):
    target = tmp_path / "available.csv"

    cli.main(["--view", "available", "--csv", str(target)])

    assert f"CSV written: {target}" in capsys.readouterr().out
    assert len(pd.read_csv(target, encoding="utf-8-sig")) == 35


def test_main_pdf(mock_mode, tmp_path, capsys):
    target = tmp_path / "inventory.pdf"

    cli.main(["--pdf", str(target), "--period", "1期"])

    assert target.exists()
    assert "PDF written" in capsys.readouterr().out


def test_main_email_without_recipients(mock_mode, monkeypatch):
    monkeypatch.setattr(cli.config, "DEFAULT_RECIPIENTS", [])

    with pytest.raises(ValueError):
        cli.main(["--email"])


def test_main_email_to(mock_mode, monkeypatch, capsys):
    sent = {}
    monkeypatch.setattr(
        cli, "send_inventory_email",
        lambda text, recipients: sent.update(text=text, recipients=recipients),
    )

    cli.main(["--email", "--to", "a@example.com, b@example.com"])

    assert sent["recipients"] == ["a@example.com", "b@example.com"]
    assert "PLOT INVENTORY REPORT" in sent["text"]


def test_invalid_period_rejected():
    with pytest.raises(SystemExit):
        cli.main(["--period", "5期"])


def test_verbose_raises_console_logging(mock_mode, monkeypatch, capsys):
    levels = []
    monkeypatch.setattr(cli, "set_console_level", levels.append)

    cli.main(["--verbose"])

    assert levels == ["INFO"]


def _section_row(period, section, total, used, remaining):
    return {
        "period": period, "section": section, "totalCount": total,
        "usedCount": used, "remainingCount": remaining,
        "usageRate": round(used / total * 100, 1),
    }


def test_select_items_reads_backend_in_real_mode(real_mode, make_client):
    requests = []
    pages = {
        "1": [_section_row("1期", "B", 6, 6, 0), _section_row("2期", "2", 125, 125, 0)],
        "2": [_section_row("4期", "5", 8, 8, 0)],
    }

    def handler(request):
        params = dict(request.url.params)
        requests.append(params)
        return httpx.Response(200, json={
            "success": True,
            "data": {
                "items": pages[params["page"]],
                "pagination": {"page": int(params["page"]), "limit": 100, "total": 3, "totalPages": 2},
            },
        })

    items = cli.select_items("soldout", client=make_client(handler))

    assert [(i.period, i.section) for i in items] == [("1期", "B"), ("2期", "2"), ("4期", "5")]
    assert [r["page"] for r in requests] == ["1", "2"]
    assert all(r["status"] == "sold_out" for r in requests)


def test_select_items_sorts_on_backend(real_mode, make_client):
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        return httpx.Response(200, json={"success": True, "data": {"items": []}})

    assert cli.select_items("remaining", "4期", ascending=True, client=make_client(handler)) == []
    assert seen["sortBy"] == "remainingCount"
    assert seen["sortOrder"] == "asc"
    assert seen["period"] == "4期"


def test_main_json_snapshot(mock_mode, tmp_path, capsys):
    target = tmp_path / "snapshot.json"

    cli.main(["--view", "soldout", "--json", str(target)])

    assert f"JSON written: {target}" in capsys.readouterr().out
    payload = json.loads(target.read_text(encoding="utf-8"))
    assert payload["summary"]["remainingCount"] == 629
    assert [p["period"] for p in payload["periods"]] == ["1期", "2期", "3期", "4期"]
    assert [s["section"] for s in payload["sections"]] == ["B", "2", "5", "5"]
    assert payload["sections"][0]["totalCount"] == 6
