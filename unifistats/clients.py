"""Gauges for UniFi clients and their deep packet inspection data."""

from __future__ import annotations

from typing import Any, Dict

from .points import metric_namespace, report_gauge_for_float64_map
from .unifi import Client, DPIData, DPITable

# controller -> site -> application or category name -> running totals
DPITotals = Dict[str, Dict[str, Dict[str, DPIData]]]


def _category_name(dpi: DPIData) -> str:
    return str(dpi.cat.as_int())


def _application_name(dpi: DPIData) -> str:
    return f"{dpi.cat.as_int()}:{dpi.app.as_int()}"


def batch_client(report: Any, client: Client) -> None:
    """Send gauges for one client of the network."""
    tags = {
        "mac": client.mac,
        "site_name": client.site_name,
        "source": client.source_name,
        "ap_name": client.ap_name,
        "gw_name": client.gw_name,
        "sw_name": client.sw_name,
        "oui": client.oui,
        "radio_name": client.radio_name,
        "radio": client.radio,
        "radio_proto": client.radio_proto,
        "name": client.name,
        "fixed_ip": client.fixed_ip,
        "sw_port": client.sw_port.txt,
        "os_class": client.os_class.txt,
        "os_name": client.os_name.txt,
        "dev_cat": client.dev_cat.txt,
        "dev_id": client.dev_id.txt,
        "dev_vendor": client.dev_vendor.txt,
        "dev_family": client.dev_family.txt,
        "is_wired": client.is_wired.txt,
        "is_guest": client.is_guest.txt,
        "use_fixed_ip": client.use_fixed_ip.txt,
        "channel": client.channel.txt,
        "vlan": client.vlan.txt,
        "hostname": client.name,
        "essid": client.essid,
        "bssid": client.bssid,
        "ip": client.ip,
    }
    data = {
        "anomalies": client.anomalies.val,
        "channel": client.channel.val,
        "satisfaction": client.satisfaction.val,
        "bytes_r": client.bytes_r.val,
        "ccq": client.ccq.val,
        "noise": client.noise.val,
        "powersave_enabled": client.powersave_enabled.as_float(),
        "roam_count": client.roam_count.val,
        "rssi": client.rssi.val,
        "rx_bytes": client.rx_bytes.val,
        "rx_bytes_r": client.rx_bytes_r.val,
        "rx_packets": client.rx_packets.val,
        "rx_rate": client.rx_rate.val,
        "signal": client.signal.val,
        "tx_bytes": client.tx_bytes.val,
        "tx_bytes_r": client.tx_bytes_r.val,
        "tx_packets": client.tx_packets.val,
        "tx_retries": client.tx_retries.val,
        "tx_power": client.tx_power.val,
        "tx_rate": client.tx_rate.val,
        "uptime": client.uptime.val,
        "wifi_tx_attempts": client.wifi_tx_attempts.val,
        "wired_rx_bytes": client.wired_rx_bytes.val,
        "wired_rx_bytes-r": client.wired_rx_bytes_r.val,
        "wired_rx_packets": client.wired_rx_packets.val,
        "wired_tx_bytes": client.wired_tx_bytes.val,
        "wired_tx_bytes-r": client.wired_tx_bytes_r.val,
        "wired_tx_packets": client.wired_tx_packets.val,
    }
    report_gauge_for_float64_map(report, metric_namespace("clients"), data, tags)


def _dpi_data(dpi: DPIData) -> dict[str, float]:
    return {
        "tx_packets": dpi.tx_packets.val,
        "rx_packets": dpi.rx_packets.val,
        "tx_bytes": dpi.tx_bytes.val,
        "rx_bytes": dpi.rx_bytes.val,
    }


def batch_client_dpi(
    report: Any, table: Any, app_total: DPITotals, cat_total: DPITotals
) -> None:
    """Send DPI gauges for one client and add them to the running totals.

    Raises ``TypeError`` when ``table`` is not a :class:`DPITable`.
    """
    if not isinstance(table, DPITable):
        raise TypeError(
            f"invalid type given to batch_client_dpi: {type(table).__name__}"
        )

    metric_name = metric_namespace("client_dpi")
    for dpi in table.by_app:
        category = _category_name(dpi)
        application = _application_name(dpi)
        fill_dpi_totals(app_total, application, table.source_name, table.site_name, dpi)
        fill_dpi_totals(cat_total, category, table.source_name, table.site_name, dpi)

        tags = {
            "category": category,
            "application": application,
            "name": table.name,
            "mac": table.mac,
            "site_name": table.site_name,
            "source": table.source_name,
        }
        report_gauge_for_float64_map(report, metric_name, _dpi_data(dpi), tags)


def fill_dpi_totals(
    totals: DPITotals, name: str, controller: str, site: str, dpi: DPIData
) -> None:
    """Add the packet and byte counts of ``dpi`` to the total kept under ``name``."""
    by_name = totals.setdefault(controller, {}).setdefault(site, {})
    existing = by_name.setdefault(name, DPIData())
    existing.tx_packets.add(dpi.tx_packets)
    existing.rx_packets.add(dpi.rx_packets)
    existing.tx_bytes.add(dpi.tx_bytes)
    existing.rx_bytes.add(dpi.rx_bytes)


def report_client_dpi_totals(
    report: Any, app_total: DPITotals | None, cat_total: DPITotals | None
) -> None:
    """Send the per-category DPI totals.

    Application totals would produce thousands of metrics per site and are
    not sent.
    """
    kinds = (("category", cat_total or {}),)
    metric_name = metric_namespace("client_dpi")
    for kind, totals in kinds:
        for controller, sites in totals.items():
            for site, by_name in sites.items():
                for name, dpi in by_name.items():
                    tags = {
                        "category": "TOTAL",
                        "application": "TOTAL",
                        "name": "TOTAL",
                        "mac": "TOTAL",
                        "site_name": site,
                        "source": controller,
                    }
                    tags[kind] = name
                    report_gauge_for_float64_map(report, metric_name, _dpi_data(dpi), tags)