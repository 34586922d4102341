"""Gauges for access points, switches and power distribution units."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .points import (
    batch_sys_stats,
    bool_to_float64,
    clean_tags,
    combine_float64,
    metric_namespace,
    report_gauge_for_float64_map,
)
from .report import Item
from .unifi import PDU, UAP, USW, VAP, Ap, Port, Radio, RadioStats, RogueAP, Sw


def _device_tags(device: Any) -> dict[str, str]:
    return clean_tags(
        {
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
    )


def _stat_part(device: Any, part: str) -> Any:
    stat = device.stat
    return getattr(stat, part) if stat is not None else None


def _inactive(device: Any) -> bool:
    return not device.adopted.val or device.locating.val


def batch_rogue_ap(report: Any, ap: RogueAP) -> None:
    """Send gauges for a neighbouring access point seen recently."""
    if ap.age.val == 0:
        return

    tags = clean_tags(
        {
            "security": ap.security,
            "oui": ap.oui,
            "band": ap.band,
            "mac": ap.bssid,
            "ap_mac": ap.ap_mac,
            "radio": ap.radio,
            "radio_name": ap.radio_name,
            "site_name": ap.site_name,
            "name": ap.essid,
            "source": ap.source_name,
        }
    )
    data = {
        "age": ap.age.val,
        "bw": ap.bw.val,
        "center_freq": ap.center_freq.val,
        "channel": float(ap.channel),
        "freq": ap.freq.val,
        "noise": ap.noise.val,
        "rssi": ap.rssi.val,
        "rssi_age": ap.rssi_age.val,
        "signal": ap.signal.val,
    }
    report_gauge_for_float64_map(report, metric_namespace("uap_rogue"), data, tags)


def batch_uap(report: Any, device: UAP, dead_ports: bool) -> None:
    """Send gauges for a wireless access point, its VAPs and its ports."""
    tags = _device_tags(device)
    data = combine_float64(
        process_uap_stats(_stat_part(device, "ap")),
        batch_sys_stats(device.sys_stats, device.system_stats),
    )
    data.update(
        {
            "bytes": device.bytes.val,
            "last_seen": device.last_seen.val,
            "rx_bytes": device.rx_bytes.val,
            "tx_bytes": device.tx_bytes.val,
            "uptime": device.uptime.val,
            "user_num_sta": device.user_num_sta.val,
            "guest_num_sta": device.guest_num_sta.val,
            "num_sta": device.num_sta.val,
            "upgradeable": device.upgradeable.as_float(),
            "adopted": device.adopted.as_float(),
            "locating": device.locating.as_float(),
        }
    )

    report.add_count(Item.UAP)
    report_gauge_for_float64_map(report, metric_namespace("uap"), data, tags)

    process_vap_table(report, tags, device.vap_table)
    batch_port_table(report, tags, device.port_table, dead_ports)


def process_uap_stats(ap: Ap | None) -> dict[str, float]:
    """Build the accumulative access point statistics; empty without stats."""
    if ap is None:
        return {}

    return {
        "stat_user-rx_packets": ap.user_rx_packets.val,
        "stat_guest-rx_packets": ap.guest_rx_packets.val,
        "stat_rx_packets": ap.rx_packets.val,
        "stat_user-rx_bytes": ap.user_rx_bytes.val,
        "stat_guest-rx_bytes": ap.guest_rx_bytes.val,
        "stat_rx_bytes": ap.rx_bytes.val,
        "stat_user-rx_errors": ap.user_rx_errors.val,
        "stat_guest-rx_errors": ap.guest_rx_errors.val,
        "stat_rx_errors": ap.rx_errors.val,
        "stat_user-rx_dropped": ap.user_rx_dropped.val,
        "stat_guest-rx_dropped": ap.guest_rx_dropped.val,
        "stat_rx_dropped": ap.rx_dropped.val,
        "stat_user-rx_crypts": ap.user_rx_crypts.val,
        "stat_guest-rx_crypts": ap.guest_rx_crypts.val,
        "stat_rx_crypts": ap.rx_crypts.val,
        "stat_user-rx_frags": ap.user_rx_frags.val,
        "stat_guest-rx_frags": ap.guest_rx_frags.val,
        "stat_rx_frags": ap.rx_frags.val,
        "stat_user-tx_packets": ap.user_tx_packets.val,
        "stat_guest-tx_packets": ap.guest_tx_packets.val,
        "stat_tx_packets": ap.tx_packets.val,
        "stat_user-tx_bytes": ap.user_tx_bytes.val,
        "stat_guest-tx_bytes": ap.guest_tx_bytes.val,
        "stat_tx_bytes": ap.tx_bytes.val,
        "stat_user-tx_errors": ap.user_tx_errors.val,
        "stat_guest-tx_errors": ap.guest_tx_errors.val,
        "stat_tx_errors": ap.tx_errors.val,
        "stat_user-tx_dropped": ap.user_tx_dropped.val,
        "stat_guest-tx_dropped": ap.guest_tx_dropped.val,
        "stat_tx_dropped": ap.tx_dropped.val,
        "stat_user-tx_retries": ap.user_tx_retries.val,
        "stat_guest-tx_retries": ap.guest_tx_retries.val,
    }


def process_vap_table(report: Any, tags: Mapping[str, str], vaps: Iterable[VAP]) -> None:
    """Send gauges for each virtual access point of a radio device."""
    metric_name = metric_namespace("uap_vaps")
    for vap in vaps:
        vap_tags = {
            "device_name": tags.get("name", ""),
            "site_name": tags.get("site_name", ""),
            "source": tags.get("source", ""),
            "ap_mac": vap.ap_mac,
            "bssid": vap.bssid,
            "id": vap.id,
            "name": vap.name,
            "radio_name": vap.radio_name,
            "radio": vap.radio,
            "essid": vap.essid,
            "site_id": vap.site_id,
            "usage": vap.usage,
            "state": vap.state,
            "is_guest": vap.is_guest.txt,
        }
        data = {
            "ccq": float(vap.ccq),
            "mac_filter_rejections": float(vap.mac_filter_rejections),
            "num_satisfaction_sta": vap.num_satisfaction_sta.val,
            "avg_client_signal": vap.avg_client_signal.val,
            "satisfaction": vap.satisfaction.val,
            "satisfaction_now": vap.satisfaction_now.val,
            "num_sta": float(vap.num_sta),
            "channel": vap.channel.val,
            "rx_bytes": vap.rx_bytes.val,
            "rx_crypts": vap.rx_crypts.val,
            "rx_dropped": vap.rx_dropped.val,
            "rx_errors": vap.rx_errors.val,
            "rx_frags": vap.rx_frags.val,
            "rx_nwids": vap.rx_nwids.val,
            "rx_packets": vap.rx_packets.val,
            "tx_bytes": vap.tx_bytes.val,
            "tx_dropped": vap.tx_dropped.val,
            "tx_errors": vap.tx_errors.val,
            "tx_packets": vap.tx_packets.val,
            "tx_power": vap.tx_power.val,
            "tx_retries": vap.tx_retries.val,
            "tx_combined_retries": vap.tx_combined_retries.val,
            "tx_data_mpdu_bytes": vap.tx_data_mpdu_bytes.val,
            "tx_rts_retries": vap.tx_rts_retries.val,
            "tx_success": vap.tx_success.val,
            "tx_total": vap.tx_total.val,
            "tx_tcp_goodbytes": vap.tx_tcp_goodbytes.val,
            "tx_tcp_lat_avg": vap.tx_tcp_lat_avg.val,
            "tx_tcp_lat_max": vap.tx_tcp_lat_max.val,
            "tx_tcp_lat_min": vap.tx_tcp_lat_min.val,
            "rx_tcp_goodbytes": vap.rx_tcp_goodbytes.val,
            "rx_tcp_lat_avg": vap.rx_tcp_lat_avg.val,
            "rx_tcp_lat_max": vap.rx_tcp_lat_max.val,
            "rx_tcp_lat_min": vap.rx_tcp_lat_min.val,
            "wifi_tx_latency_mov_avg": vap.wifi_tx_latency_mov_avg.val,
            "wifi_tx_latency_mov_max": vap.wifi_tx_latency_mov_max.val,
            "wifi_tx_latency_mov_min": vap.wifi_tx_latency_mov_min.val,
            "wifi_tx_latency_mov_total": vap.wifi_tx_latency_mov_total.val,
            "wifi_tx_latency_mov_cuont": vap.wifi_tx_latency_mov_count.val,
        }
        report_gauge_for_float64_map(report, metric_name, data, vap_tags)


def process_radio_table(
    report: Any,
    tags: Mapping[str, str],
    radios: Iterable[Radio],
    radio_stats: Iterable[RadioStats],
) -> None:
    """Send gauges for each radio, merged with its statistics when found."""
    metric_name = metric_namespace("uap_radios")
    stats = list(radio_stats)
    for radio in radios:
        radio_tags = {
            "device_name": tags.get("name", ""),
            "site_name": tags.get("site_name", ""),
            "source": tags.get("source", ""),
            "channel": radio.channel.txt,
            "radio": radio.radio,
            "ht": radio.ht.txt,
        }
        data = {
            "current_antenna_gain": radio.current_antenna_gain.val,
            "max_txpower": radio.max_txpower.val,
            "min_txpower": radio.min_txpower.val,
            "nss": radio.nss.val,
            "radio_caps": radio.radio_caps.val,
        }

        wanted = radio.name.casefold()
        match = next((s for s in stats if s.name.casefold() == wanted), None)
        if match is not None:
            data.update(
                {
                    "ast_be_xmit": match.ast_be_xmit.val,
                    "channel": match.channel.val,
                    "cu_self_rx": match.cu_self_rx.val,
                    "cu_self_tx": match.cu_self_tx.val,
                    "cu_total": match.cu_total.val,
                    "ext_channel": match.extchannel.val,
                    "gain": match.gain.val,
                    "guest_num_sta": match.guest_num_sta.val,
                    "num_sta": match.num_sta.val,
                    "tx_packets": match.tx_packets.val,
                    "tx_power": match.tx_power.val,
                    "tx_retries": match.tx_retries.val,
                    "user_num_sta": match.user_num_sta.val,
                }
            )

        report_gauge_for_float64_map(report, metric_name, data, radio_tags)


def batch_usw(report: Any, device: USW, dead_ports: bool) -> None:
    """Send gauges for an adopted switch and its ports."""
    if _inactive(device):
        return

    tags = _device_tags(device)
    data = combine_float64(
        batch_usw_stat(_stat_part(device, "sw")),
        batch_sys_stats(device.sys_stats, device.system_stats),
        {
            "guest_num_sta": device.guest_num_sta.val,
            "bytes": device.bytes.val,
            "fan_level": device.fan_level.val,
            "general_temperature": device.general_temperature.val,
            "last_seen": device.last_seen.val,
            "rx_bytes": device.rx_bytes.val,
            "tx_bytes": device.tx_bytes.val,
            "uptime": device.uptime.val,
            "state": device.state.val,
            "user_num_sta": device.user_num_sta.val,
            "upgradeable": bool_to_float64(device.upgradeable.val),
        },
    )

    report.add_count(Item.USW)
    report_gauge_for_float64_map(report, metric_namespace("usw"), data, tags)

    batch_port_table(report, tags, device.port_table, dead_ports)


def batch_usw_stat(sw: Sw | None) -> dict[str, float]:
    """Build the accumulative switch statistics; empty without stats."""
    if sw is None:
        return {}

    return {
        "stat_bytes": sw.bytes.val,
        "stat_rx_bytes": sw.rx_bytes.val,
        "stat_rx_crypts": sw.rx_crypts.val,
        "stat_rx_dropped": sw.rx_dropped.val,
        "stat_rx_errors": sw.rx_errors.val,
        "stat_rx_frags": sw.rx_frags.val,
        "stat_rx_packets": sw.tx_packets.val,
        "stat_tx_bytes": sw.tx_bytes.val,
        "stat_tx_dropped": sw.tx_dropped.val,
        "stat_tx_errors": sw.tx_errors.val,
        "stat_tx_packets": sw.tx_packets.val,
        "stat_tx_retries": sw.tx_retries.val,
    }


def batch_port_table(
    report: Any, tags: Mapping[str, str], ports: Iterable[Port], dead_ports: bool
) -> None:
    """Send gauges for each port; down or disabled ports only with ``dead_ports``."""
    metric_name = metric_namespace("usw.ports")
    device_name = tags.get("name", "")
    for port in ports:
        if not dead_ports and (not port.up.val or not port.enable.val):
            continue

        port_tags = clean_tags(
            {
                "site_name": tags.get("site_name", ""),
                "device_name": device_name,
                "source": tags.get("source", ""),
                "type": tags.get("type", ""),
                "name": port.name,
                "poe_mode": port.poe_mode,
                "port_poe": port.port_poe.txt,
                "port_idx": port.port_idx.txt,
                "port_id": f"{device_name} Port {port.port_idx.txt}",
                "poe_enable": port.poe_enable.txt,
                "flow_ctrl_rx": port.flowctrl_rx.txt,
                "flow_ctrl_tx": port.flowctrl_tx.txt,
                "media": port.media,
                "has_sfp": port.sfp_found.txt,
                "sfp_compliance": port.sfp_compliance,
                "sfp_serial": port.sfp_serial,
                "sfp_vendor": port.sfp_vendor,
                "sfp_part": port.sfp_part,
            }
        )
        data = {
            "bytes_r": port.bytes_r.val,
            "rx_broadcast": port.rx_broadcast.val,
            "rx_bytes": port.rx_bytes.val,
            "rx_bytes_r": port.rx_bytes_r.val,
            "rx_dropped": port.rx_dropped.val,
            "rx_errors": port.rx_errors.val,
            "rx_multicast": port.rx_multicast.val,
            "rx_packets": port.rx_packets.val,
            "speed": port.speed.val,
            "stp_path_cost": port.stp_pathcost.val,
            "tx_broadcast": port.tx_broadcast.val,
            "tx_bytes": port.tx_bytes.val,
            "tx_bytes_r": port.tx_bytes_r.val,
            "tx_dropped": port.tx_dropped.val,
            "tx_errors": port.tx_errors.val,
            "tx_multicast": port.tx_multicast.val,
            "tx_packets": port.tx_packets.val,
        }

        if port.poe_enable.val and port.port_poe.val:
            data["poe_current"] = port.poe_current.val
            data["poe_power"] = port.poe_power.val
            data["poe_voltage"] = port.poe_voltage.val

        if port.sfp_found.val:
            data["sfp_current"] = port.sfp_current.val
            data["sfp_voltage"] = port.sfp_voltage.val
            data["sfp_temperature"] = port.sfp_temperature.val
            data["sfp_tx_power"] = port.sfp_txpower.val
            data["sfp_rx_power"] = port.sfp_rxpower.val

        report_gauge_for_float64_map(report, metric_name, data, port_tags)


def batch_pdu(report: Any, device: PDU, dead_ports: bool) -> None:
    """Send gauges for an adopted PDU, its ports and its outlets."""
    if _inactive(device):
        return

    tags = _device_tags(device)
    data = combine_float64(
        batch_usw_stat(_stat_part(device, "sw")),
        batch_sys_stats(device.sys_stats, device.system_stats),
        {
            "guest_num_sta": device.guest_num_sta.val,
            "bytes": device.bytes.val,
            "outlet_ac_power_budget": device.outlet_ac_power_budget.val,
            "outlet_ac_power_consumption": device.outlet_ac_power_consumption.val,
            "outlet_enabled": bool_to_float64(device.outlet_enabled.val),
            "overheating": bool_to_float64(device.overheating.val),
            "power_source": device.power_source.val,
            "total_max_power": device.total_max_power.val,
            "last_seen": device.last_seen.val,
            "rx_bytes": device.rx_bytes.val,
            "tx_bytes": device.tx_bytes.val,
            "uptime": device.uptime.val,
            "state": device.state.val,
            "user_num_sta": device.user_num_sta.val,
            "upgradeable": bool_to_float64(device.upgradeable.val),
        },
    )

    report.add_count(Item.PDU)
    report_gauge_for_float64_map(report, metric_namespace("pdu"), data, tags)

    batch_port_table(report, tags, device.port_table, dead_ports)

    overrides_name = metric_namespace("pdu.outlet_overrides")
    for override in device.outlet_overrides:
        override_tags = clean_tags(
            {
                **_raw_device_tags(device),
                "outlet_index": override.index.txt,
                "outlet_name": override.name,
            }
        )
        override_data = {
            "cycle_enabled": bool_to_float64(override.cycle_enabled.val),
            "relay_state": bool_to_float64(override.relay_state.val),
        }
        report_gauge_for_float64_map(report, overrides_name, override_data, override_tags)

    table_name = metric_namespace("pdu.outlet_table")
    for outlet in device.outlet_table:
        outlet_tags = clean_tags(
            {
                **_raw_device_tags(device),
                "outlet_index": outlet.index.txt,
                "outlet_name": outlet.name,
            }
        )
        outlet_data = {
            "cycle_enabled": bool_to_float64(outlet.cycle_enabled.val),
            "relay_state": bool_to_float64(outlet.relay_state.val),
            "outlet_caps": outlet.outlet_caps.val,
            "outlet_power_factor": outlet.outlet_power_factor.val,
            "outlet_current": outlet.outlet_current.val,
            "outlet_power": outlet.outlet_power.val,
            "outlet_voltage": outlet.outlet_voltage.val,
        }
        report_gauge_for_float64_map(report, table_name, outlet_data, outlet_tags)


def _raw_device_tags(device: Any) -> dict[str, str]:
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