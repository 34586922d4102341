import pytest

from unifistats.clients import (
    batch_client,
    batch_client_dpi,
    fill_dpi_totals,
    report_client_dpi_totals,
)
from unifistats.report import Report
from unifistats.unifi import Client, DPIData, DPITable, FlexBool, FlexInt


class RecordingClient:
    def __init__(self):
        self.gauges = []

    def gauge(self, name, value, tags, rate):
        self.gauges.append((name, value, tags))


def make_report():
    return Report(client=RecordingClient())


def dpi(cat, app, tx_packets, rx_bytes):
    return DPIData(
        cat=FlexInt(cat),
        app=FlexInt(app),
        tx_packets=FlexInt(tx_packets),
        rx_bytes=FlexInt(rx_bytes),
    )


def test_batch_client_gauges():
    report = make_report()
    client = Client(
        mac="00:00:5e:00:53:10",
        site_name="default",
        source_name="ctrl",
        name="laptop",
        rx_bytes=FlexInt(1234),
        powersave_enabled=FlexBool(True),
    )
    batch_client(report, client)

    gauges = {name: (value, tags) for name, value, tags in report.client.gauges}
    assert len(gauges) == 28
    assert "unifi.clients.wired_rx_bytes-r" in gauges
    assert gauges["unifi.clients.rx_bytes"][0] == 1234
    assert gauges["unifi.clients.powersave_enabled"][0] == 1.0
    tags = gauges["unifi.clients.rx_bytes"][1]
    assert "mac:00:00:5e:00:53:10" in tags
    assert "hostname:laptop" in tags
    assert "name:laptop" in tags
    # Client tags are not cleaned, empty ones stay.
    assert "gw_name:" in tags


def test_batch_client_powersave_off():
    report = make_report()
    batch_client(report, Client())
    values = {name: value for name, value, _ in report.client.gauges}
    assert values["unifi.clients.powersave_enabled"] == 0.0


def test_batch_client_dpi_rejects_other_types():
    with pytest.raises(TypeError):
        batch_client_dpi(make_report(), Client(), {}, {})


def test_batch_client_dpi_sends_and_totals():
    report = make_report()
    table = DPITable(
        name="laptop",
        mac="00:00:5e:00:53:10",
        site_name="site",
        source_name="ctrl",
        by_app=[dpi(3, 7, 10, 100), dpi(3, 8, 5, 50)],
    )
    app_total, cat_total = {}, {}
    batch_client_dpi(report, table, app_total, cat_total)

    assert len(report.client.gauges) == 8
    assert {name for name, _, _ in report.client.gauges} == {
        "unifi.client_dpi.tx_packets",
        "unifi.client_dpi.rx_packets",
        "unifi.client_dpi.tx_bytes",
        "unifi.client_dpi.rx_bytes",
    }
    per_cat = cat_total["ctrl"]["site"]
    assert len(per_cat) == 1
    (total,) = per_cat.values()
    assert total.tx_packets.val == 10 + 5
    assert total.rx_bytes.val == 100 + 50
    assert len(app_total["ctrl"]["site"]) == 2


def test_fill_dpi_totals_accumulates():
    totals = {}
    fill_dpi_totals(totals, "web", "ctrl", "site", dpi(1, 1, 4, 40))
    fill_dpi_totals(totals, "web", "ctrl", "site", dpi(1, 2, 6, 60))
    fill_dpi_totals(totals, "mail", "ctrl", "other", dpi(1, 3, 2, 20))

    web = totals["ctrl"]["site"]["web"]
    assert web.tx_packets.val == 4 + 6
    assert web.rx_bytes.val == 40 + 60
    assert totals["ctrl"]["other"]["mail"].tx_packets.val == 2


def test_fill_dpi_totals_does_not_alias_input():
    source = dpi(1, 1, 4, 40)
    totals = {}
    fill_dpi_totals(totals, "web", "ctrl", "site", source)
    fill_dpi_totals(totals, "web", "ctrl", "site", source)
    assert source.tx_packets.val == 4
    assert totals["ctrl"]["site"]["web"].tx_packets.val == 8


def test_report_totals_sends_categories_only():
    report = make_report()
    app_total, cat_total = {}, {}
    fill_dpi_totals(app_total, "app", "ctrl", "site", dpi(1, 1, 4, 40))
    fill_dpi_totals(cat_total, "cat", "ctrl", "site", dpi(1, 1, 4, 40))

    report_client_dpi_totals(report, app_total, cat_total)

    assert len(report.client.gauges) == 4
    for _, _, tags in report.client.gauges:
        assert "category:cat" in tags
        assert "application:TOTAL" in tags
        assert "mac:TOTAL" in tags
        assert "site_name:site" in tags
        assert "source:ctrl" in tags
    values = {name: value for name, value, _ in report.client.gauges}
    assert values["unifi.client_dpi.tx_packets"] == 4


def test_report_totals_empty():
    report = make_report()
    report_client_dpi_totals(report, None, None)
    assert report.client.gauges == []