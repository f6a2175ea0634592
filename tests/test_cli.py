import json

from cli import lookup_plate, main


def test_lookup_plate_success():
    result = lookup_plate("粤b d1234a")
    assert result == {
        "plate": "粤BD1234A",
        "kind": "new_energy",
        "province": "广东省",
        "area": "深圳",
        "is_new_energy": True,
    }


def test_lookup_plate_error():
    result = lookup_plate("ZZ123456")
    assert result["kind"] == "invalid"
    assert result["error"] == "no matching province/region"


def test_main_prints_resolution(capsys):
    assert main(["京A12345", "晋G12345"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "京A·12345  北京市  警察部门"
    assert out[1] == "晋G·12345  山西省  未知区域"


def test_main_marks_new_energy(capsys):
    assert main(["粤BD1234A"]) == 0
    assert capsys.readouterr().out.strip().endswith("新能源")


def test_main_fails_on_bad_plate(capsys):
    assert main(["京A12345", "京AD12345"]) == 1
    captured = capsys.readouterr()
    assert "北京市" in captured.out
    assert "plate format not recognized" in captured.err


def test_main_json_output(capsys):
    assert main(["--json", "京A12345", ""]) == 1
    results = json.loads(capsys.readouterr().out)
    assert results[0]["province"] == "北京市"
    assert results[1] == {"plate": "", "kind": "invalid", "error": "plate number required"}


def test_main_classify_only(capsys):
    assert main(["--classify-only", "粤BD1234", "ZZ123456"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["粤BD1234  新能源车牌", "ZZ123456  格式错误"]
