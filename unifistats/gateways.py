"""Gauges for gateways: USG, UXG and the all-in-one UDM."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .devices import (
    batch_port_table,
    batch_usw_stat,
    process_radio_table,
    process_uap_stats,
    process_vap_table,
)
from .points import (
    batch_sys_stats,
    batch_udm_storage,
    batch_udm_temps,
    bool_to_float64,
    clean_tags,
    combine_float64,
    metric_namespace,
    report_gauge_for_float64_map,
)
from .report import Item
from .unifi import UDM, USG, UXG, Gw, Network, SpeedtestStatus, Uplink, Wan


def _inactive(device: Any) -> bool:
    return not device.adopted.val or device.locating.val


def _stat_part(device: Any, part: str) -> Any:
    stat = device.stat
    return getattr(stat, part) if stat is not None else None


def _base_tags(device: Any) -> dict[str, str]:
    return {
        "mac": device.mac,
        "site_name": device.site_name,
        "source": device.source_name,
        "name": device.name,
        "version": device.version,
        "model": device.model,
        "serial": device.serial,
        "type": device.type,
        "ip": device.ip,
    }


def _gateway_tags(device: Any) -> dict[str, str]:
    return {**_base_tags(device), "license_state": device.license_state}


def _gateway_data(device: Any) -> dict[str, float]:
    return {
        "bytes": device.bytes.val,
        "last_seen": device.last_seen.val,
        "guest_num_sta": device.guest_num_sta.val,
        "rx_bytes": device.rx_bytes.val,
        "tx_bytes": device.tx_bytes.val,
        "uptime": device.uptime.val,
        "state": device.state.val,
        "user_num_sta": device.user_num_sta.val,
        "num_desktop": device.num_desktop.val,
        "num_handheld": device.num_handheld.val,
        "num_mobile": device.num_mobile.val,
    }


def _switch_data(device: Any) -> dict[str, float]:
    return {
        "guest_num_sta": device.guest_num_sta.val,
        "bytes": device.bytes.val,
        "last_seen": device.last_seen.val,
        "rx_bytes": device.rx_bytes.val,
        "tx_bytes": device.tx_bytes.val,
        "uptime": device.uptime.val,
    }


def batch_usg(report: Any, device: USG) -> None:
    """Send gauges for an adopted security gateway, its networks and WANs."""
    if _inactive(device):
        return

    # Gateway tags are sent as they are, empty values included.
    tags = _gateway_tags(device)
    data = combine_float64(
        batch_udm_temps(device.temperatures),
        batch_sys_stats(device.sys_stats, device.system_stats),
        batch_usg_stats(device.speedtest_status, _stat_part(device, "gw"), device.uplink),
        {
            **_gateway_data(device),
            "upgradeable": bool_to_float64(device.upgradeable.val),
        },
    )

    report.add_count(Item.USG)
    report_gauge_for_float64_map(report, metric_namespace("usg"), data, tags)

    batch_net_table(report, tags, device.network_table)
    batch_usg_wans(report, tags, device.wan1, device.wan2)


def batch_usg_stats(
    speedtest: SpeedtestStatus, gw: Gw | None, uplink: Uplink
) -> dict[str, float]:
    """Build uplink, speed test and LAN gauges; empty without gateway stats."""
    if gw is None:
        return {}

    return {
        "uplink_latency": uplink.latency.val,
        "uplink_speed": uplink.speed.val,
        "speedtest_status_latency": speedtest.latency.val,
        "speedtest_status_runtime": speedtest.runtime.val,
        "speedtest_status_rundate": speedtest.rundate.val,
        "speedtest_status_ping": speedtest.status_ping.val,
        "speedtest_status_xput_download": speedtest.xput_download.val,
        "speedtest_status_xput_upload": speedtest.xput_upload.val,
        "lan_rx_bytes": gw.lan_rx_bytes.val,
        "lan_rx_packets": gw.lan_rx_packets.val,
        "lan_tx_bytes": gw.lan_tx_bytes.val,
        "lan_tx_packets": gw.lan_tx_packets.val,
        "lan_rx_dropped": gw.lan_rx_dropped.val,
    }


def batch_usg_wans(report: Any, tags: Mapping[str, str], *args: Wan) -> None:
    """Send gauges for each WAN port that is up."""
    metric_name = metric_namespace("usg.wan_ports")
    for wan in args:
        if not wan.up.val:
            continue

        wan_tags = clean_tags(
            {
                "device_name": tags.get("name", ""),
                "site_name": tags.get("site_name", ""),
                "source": tags.get("source", ""),
                "ip": wan.ip,
                "purpose": wan.name,
                "mac": wan.mac,
                "ifname": wan.ifname,
                "type": wan.type,
                "up": wan.up.txt,
                "enabled": wan.enable.txt,
                "gateway": wan.gateway,
            }
        )
        data = {
            "bytes_r": wan.bytes_r.val,
            "full_duplex": bool_to_float64(wan.full_duplex.val),
            "max_speed": wan.max_speed.val,
            "rx_bytes": wan.rx_bytes.val,
            "rx_bytes_r": wan.rx_bytes_r.val,
            "rx_dropped": wan.rx_dropped.val,
            "rx_errors": wan.rx_errors.val,
            "rx_broadcast": wan.rx_broadcast.val,
            "rx_multicast": wan.rx_multicast.val,
            "rx_packets": wan.rx_packets.val,
            "speed": wan.speed.val,
            "tx_bytes": wan.tx_bytes.val,
            "tx_bytes_r": wan.tx_bytes_r.val,
            "tx_dropped": wan.tx_dropped.val,
            "tx_errors": wan.tx_errors.val,
            "tx_packets": wan.tx_packets.val,
            "tx_broadcast": wan.tx_broadcast.val,
            "tx_multicast": wan.tx_multicast.val,
        }
        report_gauge_for_float64_map(report, metric_name, data, wan_tags)


def batch_net_table(
    report: Any, tags: Mapping[str, str], networks: Iterable[Network]
) -> None:
    """Send gauges for each network a gateway serves."""
    metric_name = metric_namespace("usg.networks")
    for network in networks:
        net_tags = clean_tags(
            {
                "device_name": tags.get("name", ""),
                "site_name": tags.get("site_name", ""),
                "source": tags.get("source", ""),
                "up": network.up.txt,
                "enabled": network.enabled.txt,
                "ip": network.ip,
                "mac": network.mac,
                "name": network.name,
                "domain_name": network.domain_name,
                "purpose": network.purpose,
                "is_guest": network.is_guest.txt,
            }
        )
        data = {
            "num_sta": network.num_sta.val,
            "rx_bytes": network.rx_bytes.val,
            "rx_packets": network.rx_packets.val,
            "tx_bytes": network.tx_bytes.val,
            "tx_packets": network.tx_packets.val,
        }
        report_gauge_for_float64_map(report, metric_name, data, net_tags)


def batch_udm(report: Any, device: UDM, dead_ports: bool) -> None:
    """Send gateway, switch and, when present, access point gauges for a UDM."""
    if _inactive(device):
        return

    tags = clean_tags(_gateway_tags(device))
    data = combine_float64(
        batch_udm_storage(device.storage),
        batch_udm_temps(device.temperatures),
        batch_usg_stats(device.speedtest_status, _stat_part(device, "gw"), device.uplink),
        batch_sys_stats(device.sys_stats, device.system_stats),
        {
            **_gateway_data(device),
            "upgradeable": bool_to_float64(device.upgradeable.val),
        },
    )

    report.add_count(Item.UDM)
    report_gauge_for_float64_map(report, metric_namespace("usg"), data, tags)

    batch_net_table(report, tags, device.network_table)
    batch_usg_wans(report, tags, device.wan1, device.wan2)

    tags = clean_tags(_base_tags(device))
    data = combine_float64(
        batch_usw_stat(_stat_part(device, "sw")),
        {
            **_switch_data(device),
            "upgradeable": bool_to_float64(device.upgradeable.val),
        },
    )
    report_gauge_for_float64_map(report, metric_namespace("usw"), data, tags)

    batch_port_table(report, tags, device.port_table, dead_ports)

    ap = _stat_part(device, "ap")
    if ap is None:
        return

    data = process_uap_stats(ap)
    data.update(
        {
            "bytes": device.bytes.val,
            "last_seen": device.last_seen.val,
            "rx_bytes": device.rx_bytes.val,
            "tx_bytes": device.tx_bytes.val,
            "uptime": device.uptime.val,
            "state": device.state.val,
            "user_num_sta": device.user_num_sta.val,
            "guest_num_sta": device.guest_num_sta.val,
            "num_sta": device.num_sta.val,
        }
    )
    report_gauge_for_float64_map(report, metric_namespace("uap"), data, tags)

    process_radio_table(report, tags, device.radio_table, device.radio_table_stats)
    process_vap_table(report, tags, device.vap_table)


def batch_uxg(report: Any, device: UXG, dead_ports: bool) -> None:
    """Send gateway and switch gauges for a 10Gb gateway."""
    if _inactive(device):
        return

    tags = clean_tags(_gateway_tags(device))
    data = combine_float64(
        batch_udm_storage(device.storage),
        batch_udm_temps(device.temperatures),
        batch_usg_stats(device.speedtest_status, _stat_part(device, "gw"), device.uplink),
        batch_sys_stats(device.sys_stats, device.system_stats),
        _gateway_data(device),
    )

    report.add_count(Item.UXG)
    report_gauge_for_float64_map(report, metric_namespace("usg"), data, tags)

    batch_net_table(report, tags, device.network_table)
    batch_usg_wans(report, tags, device.wan1, device.wan2)

    tags = clean_tags(_base_tags(device))
    data = combine_float64(
        batch_usw_stat(_stat_part(device, "sw")),
        _switch_data(device),
    )
    report_gauge_for_float64_map(report, metric_namespace("usw"), data, tags)

    batch_port_table(report, tags, device.port_table, dead_ports)