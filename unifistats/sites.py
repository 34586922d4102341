"""Gauges and counters for UniFi sites and their DPI tables."""

from __future__ import annotations

from typing import Any

from .clients import _application_name, _category_name
from .points import metric_namespace, tag
from .unifi import DPITable, Site


def report_site(report: Any, site: Site) -> None:
    """Send one set of subsystem gauges for every health entry of a site.

    Tags are sent as they are, empty values included.
    """
    metric_name = metric_namespace("subsystems")
    for health in site.health:
        tags = [
            tag("name", site.name),
            tag("site_name", site.site_name),
            tag("source", site.source_name),
            tag("desc", site.desc),
            tag("status", health.status),
            tag("subsystem", health.subsystem),
            tag("wan_ip", health.wan_ip),
            tag("gw_name", health.gw_name),
            tag("lan_ip", health.lan_ip),
        ]
        data = {
            "num_user": health.num_user.val,
            "num_guest": health.num_guest.val,
            "num_iot": health.num_iot.val,
            "tx_bytes_r": health.tx_bytes_r.val,
            "rx_bytes_r": health.rx_bytes_r.val,
            "num_ap": health.num_ap.val,
            "num_adopted": health.num_adopted.val,
            "num_disabled": health.num_disabled.val,
            "num_disconnected": health.num_disconnected.val,
            "num_pending": health.num_pending.val,
            "num_gw": health.num_gw.val,
            "num_sta": health.num_sta.val,
            "gw_cpu": health.gw_system_stats.cpu.val,
            "gw_mem": health.gw_system_stats.mem.val,
            "gw_uptime": health.gw_system_stats.uptime.val,
            "latency": health.latency.val,
            "uptime": health.uptime.val,
            "drops": health.drops.val,
            "xput_up": health.xput_up.val,
            "xput_down": health.xput_down.val,
            "speedtest_ping": health.speedtest_ping.val,
            "speedtest_lastrun": health.speedtest_lastrun.val,
            "num_sw": health.num_sw.val,
            "remote_user_num_active": health.remote_user_num_active.val,
            "remote_user_num_inactive": health.remote_user_num_inactive.val,
            "remote_user_rx_bytes": health.remote_user_rx_bytes.val,
            "remote_user_tx_bytes": health.remote_user_tx_bytes.val,
            "remote_user_rx_packets": health.remote_user_rx_packets.val,
            "remote_user_tx_packets": health.remote_user_tx_packets.val,
            "num_new_alarms": site.num_new_alarms.val,
        }
        for name, value in data.items():
            report.report_gauge(metric_name(name), value, tags)


def report_site_dpi(report: Any, table: DPITable) -> None:
    """Send packet and byte counters for every application in a site DPI table."""
    metric_name = metric_namespace("sitedpi")
    for dpi in table.by_app:
        tags = [
            tag("category", _category_name(dpi)),
            tag("application", _application_name(dpi)),
            tag("site_name", table.site_name),
            tag("source", table.source_name),
        ]
        report.report_count(metric_name("tx_packets"), dpi.tx_packets.as_int(), tags)
        report.report_count(metric_name("rx_packets"), dpi.rx_packets.as_int(), tags)
        report.report_count(metric_name("tx_bytes"), dpi.tx_bytes.as_int(), tags)
        report.report_count(metric_name("rx_bytes"), dpi.rx_bytes.as_int(), tags)