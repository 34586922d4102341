"""Helpers that turn UniFi values into Datadog tags and gauge maps."""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Mapping

from .unifi import Storage, SysStats, SystemStats, Temperature

_STAT_NAME_RE = re.compile(r"[^a-zA-Z0-9_]")


def tag(name: str, value: Any) -> str:
    """Format a single ``name:value`` tag."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return f"{name}:{value}"


def tag_map_to_tags(tag_map: Mapping[str, Any]) -> list[str]:
    """Turn a mapping of tags into a list of ``name:value`` strings."""
    return [tag(name, value) for name, value in tag_map.items()]


def tag_map_to_simple_strings(tag_map: Mapping[str, Any]) -> str:
    """Render tags as ``name="value"`` pairs joined by commas."""
    return ", ".join(f'{name}="{value}"' for name, value in tag_map.items())


def metric_namespace(namespace: str) -> Callable[[str], str]:
    """Return a function that prefixes metric names with ``unifi.<namespace>.``."""

    def metric_name(name: str) -> str:
        return f"unifi.{namespace}.{name}"

    return metric_name


def report_gauge_for_float64_map(
    report: Any,
    metric_name: Callable[[str], str],
    data: Mapping[str, float],
    tags: Mapping[str, str],
) -> None:
    """Send every value in ``data`` as a gauge with the same tags."""
    tag_list = tag_map_to_tags(tags)
    for name, value in data.items():
        report.report_gauge(metric_name(name), value, list(tag_list))


def clean_tags(tags: Mapping[str, str]) -> dict[str, str]:
    """Return the tags without those whose value is empty."""
    return {name: value for name, value in tags.items() if value != ""}


def bool_to_float64(value: bool) -> float:
    """Map a truth value to 1.0 or 0.0 for use as a gauge."""
    return float(bool(value))


def combine(*args: Mapping[str, Any]) -> dict[str, Any]:
    """Merge maps; a later map overrides the keys of an earlier one."""
    out: dict[str, Any] = {}
    for mapping in args:
        out.update(mapping)
    return out


def combine_float64(*args: Mapping[str, float]) -> dict[str, float]:
    """Merge maps of numbers; a later map overrides an earlier one."""
    out: dict[str, float] = {}
    for mapping in args:
        out.update(mapping)
    return out


def safe_stats_name(name: str) -> str:
    """Lower-case a name and replace anything not alphanumeric or ``_``."""
    return _STAT_NAME_RE.sub("_", name.lower())


def batch_sys_stats(sys_stats: SysStats, system_stats: SystemStats) -> dict[str, float]:
    """Build the system gauges shared by every device type."""
    data = {
        "loadavg_1": sys_stats.loadavg_1.val,
        "loadavg_5": sys_stats.loadavg_5.val,
        "loadavg_15": sys_stats.loadavg_15.val,
        "mem_used": sys_stats.mem_used.val,
        "mem_buffer": sys_stats.mem_buffer.val,
        "mem_total": sys_stats.mem_total.val,
        "cpu": system_stats.cpu.val,
        "mem": system_stats.mem.val,
        "system_uptime": system_stats.uptime.val,
    }
    for name, reading in system_stats.temps.items():
        temp = reading.celsius()
        key = safe_stats_name(name)
        if temp != 0 and key:
            data[key] = float(temp)
    return data


def batch_udm_temps(temps: Iterable[Temperature]) -> dict[str, float]:
    """Build temperature gauges, skipping sensors without a name."""
    return {
        safe_stats_name("temp_" + t.name): t.value for t in temps if t.name
    }


def batch_udm_storage(storage: Iterable[Storage]) -> dict[str, float]:
    """Build size, used and percent-used gauges for each named volume."""
    data: dict[str, float] = {}
    for volume in storage:
        if not volume.name:
            continue
        size, used = volume.size.val, volume.used.val
        data[safe_stats_name(f"storage_{volume.name}_size")] = size
        data[safe_stats_name(f"storage_{volume.name}_used")] = used
        if size != 0 and used != 0 and used < size:
            pct = used / size * 100
        else:
            pct = 0.0
        data[safe_stats_name(f"storage_{volume.name}_pct")] = pct
    return data