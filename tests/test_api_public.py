from __future__ import annotations

import pytest
from fastapi import HTTPException

from wareki.api.public import get_date_from_era, get_wareki_day, get_wareki_range
from wareki.core.constructor import instant_for
from wareki.core.tables import HEISEI, MEIJI, REIWA


def test_wareki_day_reiwa():
    res = get_wareki_day("2019-05-01", north_court=False)
    assert res["date"] == "2019-05-01"
    assert res["north_court"] is False

    w = res["wareki"]
    assert w["era"]["code"] == REIWA
    assert w["era"]["name"] == "令和"
    assert w["era"]["key"] == "REIWA"
    assert w["year_of_era"] == 1
    assert w["civil_year"] == 2019
    assert w["month"] == 4
    assert w["month_code"] == 5
    assert w["month_name"] == "5月"
    assert w["day"] == 1
    assert w["is_leap_month"] is False
    assert w["lunisolar"] is False
    assert w["year_kanshi"] == "己亥"
    assert w["day_kanshi"] == "戊戌"
    assert w["weekday"] == "水"
    assert w["label"] == "令和元年5月1日"


def test_wareki_day_leap_month():
    d = instant_for(MEIJI, 1, 24, 1).date()
    w = get_wareki_day(d, north_court=False)["wareki"]
    assert w["lunisolar"] is True
    assert w["is_leap_month"] is True
    assert w["month_code"] == 24
    assert w["month_name"] == "閏四月"
    assert w["year_kanshi"] == "戊辰"
    assert w["label"] == "明治元年閏4月1日"


def test_wareki_day_north_court_from_env(monkeypatch):
    d = instant_for(165, 1, 6, 1).date()
    monkeypatch.delenv("WAREKI_NORTH_COURT", raising=False)
    assert get_wareki_day(d)["wareki"]["era"]["name"] == "興国"

    monkeypatch.setenv("WAREKI_NORTH_COURT", "1")
    res = get_wareki_day(d)
    assert res["north_court"] is True
    assert res["wareki"]["era"]["name"] == "暦応"
    assert res["wareki"]["year_of_era"] == 3

    # 引数が環境変数より優先
    assert get_wareki_day(d, north_court=False)["wareki"]["era"]["code"] == 165


def test_wareki_day_before_supported_range():
    with pytest.raises(HTTPException) as ei:
        get_wareki_day("0500-01-01")
    assert ei.value.status_code == 422


def test_wareki_day_invalid_format():
    with pytest.raises(HTTPException) as ei:
        get_wareki_day("2019/05/01")
    assert ei.value.status_code == 422


def test_wareki_range_across_era_change():
    res = get_wareki_range("2019-04-29", "2019-05-02", north_court=False)
    days = res["days"]
    assert [d["date"] for d in days] == ["2019-04-29", "2019-04-30", "2019-05-01", "2019-05-02"]
    assert [d["wareki"]["era"]["code"] for d in days] == [HEISEI, HEISEI, REIWA, REIWA]
    assert [d["wareki"]["day"] for d in days] == [29, 30, 1, 2]


def test_wareki_range_across_calendar_reform():
    res = get_wareki_range("1872-12-30", "1873-01-01", north_court=False)
    labels = [d["wareki"]["label"] for d in res["days"]]
    assert labels == ["明治5年12月1日", "明治5年12月2日", "明治6年1月1日"]


def test_wareki_range_rejects_reversed():
    with pytest.raises(ValueError):
        get_wareki_range("2019-05-02", "2019-05-01")


def test_date_from_era():
    res = get_date_from_era("令和", 1, 5, 1)
    assert res["era"]["code"] == REIWA
    assert res["date"] == "2019-05-01"
    assert res["instant"] == "2019-05-01T00:00:00+09:00"

    assert get_date_from_era("heisei", 31, 4, 30)["date"] == "2019-04-30"
    assert get_date_from_era(255, 2, 1, 1)["date"] == "2020-01-01"


@pytest.mark.parametrize(
    "era, year, month, day",
    [
        ("不明", 1, 1, 1),
        ("令和", 1, 2, 30),
        ("明治", 2, 24, 1),
        ("明治", 5, 12, 3),
    ],
)
def test_date_from_era_invalid(era, year, month, day):
    with pytest.raises(HTTPException) as ei:
        get_date_from_era(era, year, month, day)
    assert ei.value.status_code == 422


# ----------------------------
# HTTP
# ----------------------------
@pytest.fixture()
def client():
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from wareki.api.app import app

    return TestClient(app)


def test_http_day(client):
    r = client.get("/api/v1/wareki/day", params={"date": "1989-01-08", "north_court": "false"})
    assert r.status_code == 200
    w = r.json()["wareki"]
    assert w["era"]["code"] == HEISEI
    assert w["label"] == "平成元年1月8日"


def test_http_range_limit(client, monkeypatch):
    r = client.get("/api/v1/wareki/range", params={"start": "2019-01-01", "end": "2019-01-03", "limit_days": 2})
    assert r.status_code == 422

    monkeypatch.setenv("WAREKI_LIMIT_DAYS", "2")
    r = client.get("/api/v1/wareki/range", params={"start": "2019-01-01", "end": "2019-01-03"})
    assert r.status_code == 422

    r = client.get("/api/v1/wareki/range", params={"start": "2019-01-01", "end": "2019-01-02"})
    assert r.status_code == 200
    assert len(r.json()["days"]) == 2


def test_http_from_era(client):
    r = client.get("/api/v1/wareki/from-era", params={"era": "昭和", "year": 64, "month": 1, "day": 7})
    assert r.status_code == 200
    assert r.json()["date"] == "1989-01-07"

    r = client.get("/api/v1/wareki/from-era", params={"era": "昭和", "year": 1, "month": 13})
    assert r.status_code == 422
