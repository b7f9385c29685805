"""Pipeline, analysis, IO and entry point"""
import json
import sys

import pytest

from courier.analysis import OrderAnalyzer
from courier.io import DataLoader, ResultSaver
from courier.main import main
from courier.models import Order, FormatError
from courier.processing import OrderPipeline
from courier.utils import categorize_validation_issues


@pytest.fixture
def orders_file(tmp_path, mixed_orders):
    path = tmp_path / "orders.json"
    path.write_text(json.dumps([o.to_dict() for o in mixed_orders]))
    return path


def test_analyzer_counts(mixed_orders):
    analysis = OrderAnalyzer.analyze(mixed_orders)
    assert analysis['total_orders'] == 7
    assert analysis['orders_by_zone'][150] == ["Tom", "Brynn"]
    assert analysis['orders_by_urgency'][12] == ["carlos", "Carlos"]
    assert analysis['zero_urgency_orders'] == ["Lucia", "Pedro", "Brynn"]
    assert analysis['malformed_postal_codes'] == []


def test_analyzer_records_malformed_postal_codes(ana):
    analysis = OrderAnalyzer.analyze([ana, Order("Zed", "ZED", [3])])
    assert analysis['malformed_postal_codes'] == ["ZED"]
    assert analysis['orders_by_zone'] == {80: ["Ana"]}


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
def test_analyzer_records_oversized_zone(ana):
    long_code = "X-" + "9" * 5000
    analysis = OrderAnalyzer.analyze([ana, Order("Zed", long_code, [3])])
    assert analysis['malformed_postal_codes'] == [long_code]


def test_output_analysis_keys_sorted(mixed_orders):
    pipeline = OrderPipeline(mixed_orders, threshold=50)
    output = pipeline.build_complete_output(pipeline.run())
    assert list(output['analysis']['orders_by_zone']) == ["45", "99", "120", "150"]
    assert list(output['analysis']['orders_by_urgency']) == ["0", "9", "12", "48"]


def test_pipeline_run(mixed_orders):
    pipeline = OrderPipeline(mixed_orders, threshold=50)
    results = pipeline.run()
    assert [o.customer_name for o in results['sorted']] == ["Brynn", "Tom", "Eugenia", "Pedro", "Lucia"]
    assert results['dominant_urgency'] == 0
    assert results['validation_issues'] == []


def test_pipeline_complete_output_is_json_ready(mixed_orders):
    pipeline = OrderPipeline(mixed_orders, threshold=50)
    output = pipeline.build_complete_output(pipeline.run())

    json.dumps(output)
    assert output['threshold'] == 50
    assert list(output['urgency_groups']) == ["0", "9", "12", "48"]
    assert output['dominant_group']['urgency'] == 0
    assert [e['customer_name'] for e in output['dominant_group']['stack']] == ["Brynn", "Pedro", "Lucia"]
    assert output['summary']['orders_above_threshold'] == 5
    assert output['summary']['dominant_group_size'] == 3
    assert output['issue_breakdown'] == categorize_validation_issues([])


def test_pipeline_empty_input():
    pipeline = OrderPipeline([], threshold=0)
    output = pipeline.build_complete_output(pipeline.run())
    assert output['dominant_group'] == {'urgency': None, 'stack': []}
    assert output['validation_issues'] == []


def test_pipeline_propagates_format_error(ana):
    with pytest.raises(FormatError):
        OrderPipeline([ana, Order("Zed", "ZED", [])], threshold=0).run()


def test_loader_and_saver(tmp_path, orders_file):
    orders = DataLoader.load_orders(str(orders_file))
    assert [o.customer_name for o in orders][:2] == ["Eugenia", "carlos"]

    output_file = tmp_path / "out" / "results.json"
    ResultSaver().save_results({'ok': True}, str(output_file))
    assert json.loads(output_file.read_text()) == {'ok': True}


def test_main_writes_results(tmp_path, orders_file, capsys):
    output_file = tmp_path / "results.json"
    assert main(str(orders_file), str(output_file), threshold=100) == 0

    saved = json.loads(output_file.read_text())
    assert [e['customer_name'] for e in saved['sorted_orders']] == ["Brynn", "Tom", "Eugenia", "Pedro"]
    assert "PROCESSING RESULTS" in capsys.readouterr().out


def test_main_reports_malformed_data(tmp_path, capsys):
    orders_file = tmp_path / "orders.json"
    orders_file.write_text(json.dumps([{"customer_name": "Zed", "postal_code": "ZED", "priorities": []}]))
    output_file = tmp_path / "results.json"

    assert main(str(orders_file), str(output_file)) == 1
    assert not output_file.exists()
    assert "Malformed order data" in capsys.readouterr().out
