import threading
from datetime import datetime, timedelta, timezone

from unifistats.report import Counts, Item, Report, ServiceCheckStatus


class FakeClient:
    def __init__(self):
        self.calls = []

    def gauge(self, name, value, tags, rate):
        self.calls.append(("gauge", name, value, tags, rate))

    def count(self, name, value, tags, rate):
        self.calls.append(("count", name, value, tags, rate))

    def distribution(self, name, value, tags, rate):
        self.calls.append(("distribution", name, value, tags, rate))

    def timing(self, name, value, tags, rate):
        self.calls.append(("timing", name, value, tags, rate))

    def event(self, event):
        self.calls.append(("event", event))

    def service_check(self, check):
        self.calls.append(("check", check))


class FakeCollector:
    def __init__(self):
        self.logs = []

    def logf(self, msg, *args):
        self.logs.append(msg % args if args else msg)


def make_report():
    return Report(client=FakeClient(), collector=FakeCollector())


def test_counts_add_without_values_increments():
    counts = Counts()
    counts.add(Item.UAP)
    counts.add(Item.UAP)
    assert counts.val[Item.UAP] == 2


def test_counts_add_with_values_sums():
    counts = Counts()
    counts.add(Item.USW, 3, 4)
    counts.add(Item.USW, 5)
    assert counts.val[Item.USW] == 3 + 4 + 5


def test_counts_add_thread_safe():
    counts = Counts()
    per_thread, threads = 200, 8

    def work():
        for _ in range(per_thread):
            counts.add(Item.EVENT)

    workers = [threading.Thread(target=work) for _ in range(threads)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()
    assert counts.val[Item.EVENT] == per_thread * threads


def test_report_add_count():
    report = make_report()
    report.add_count(Item.ALARM)
    report.add_count(Item.ALARM, 2)
    assert report.counts.val[Item.ALARM] == 3


def test_report_error_ignores_none():
    report = make_report()
    err = ValueError("boom")
    report.error(None)
    report.error(err)
    assert report.errors == [err]


def test_report_metric_calls_use_unit_rate():
    report = make_report()
    report.report_gauge("g", 1.5, ["a:b"])
    report.report_count("c", 3, [])
    report.report_distribution("d", 2.0, [])
    report.report_timing("t", timedelta(seconds=1), [])
    assert report.client.calls == [
        ("gauge", "g", 1.5, ["a:b"], 1.0),
        ("count", "c", 3, [], 1.0),
        ("distribution", "d", 2.0, [], 1.0),
        ("timing", "t", timedelta(seconds=1), [], 1.0),
    ]


def test_report_event_keeps_given_date():
    report = make_report()
    when = datetime(2023, 5, 1, tzinfo=timezone.utc)
    report.report_event("title", when, "msg", ["x:y"])
    kind, event = report.client.calls[0]
    assert kind == "event"
    assert event.timestamp == when
    assert event.title == "title"
    assert event.text == "msg"
    assert event.tags == ["x:y"]


def test_report_event_without_date_uses_now():
    report = make_report()
    before = datetime.now().astimezone()
    report.report_event("title", None, "msg", [])
    after = datetime.now().astimezone()
    event = report.client.calls[0][1]
    assert before <= event.timestamp <= after


def test_report_service_check():
    report = make_report()
    report.report_service_check("svc", ServiceCheckStatus.CRITICAL, "down", ["t:1"])
    check = report.client.calls[0][1]
    assert check.name == "svc"
    assert check.status == ServiceCheckStatus.CRITICAL
    assert check.message == "down"


def test_report_logs_go_to_collector():
    report = make_report()
    report.report_info_log("info %s", "one")
    report.report_warn_log("warn")
    assert report.collector.logs == ["info one", "warn"]