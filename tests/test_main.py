"""
Tests for main.py - CLI の入出力と終了コード
"""
import json

import pytest

from wareki_conv.config import LOG_FILE_ENV
from wareki_conv.config import LOG_LEVEL_ENV
from wareki_conv.config import OutputFormat
from wareki_conv.main import CLIManager
from wareki_conv.main import main


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(LOG_FILE_ENV, raising=False)


class TestCLIManager:
    """CLIManager のテスト"""

    def test_dotted_arguments_stay_strings(self):
        args = CLIManager.get_cli_args(["01.02.03", "R01.02.03", "令和元年5月1日"])
        assert args["dates"] == ["01.02.03", "R01.02.03", "令和元年5月1日"]

    def test_create_config(self):
        config, dates = CLIManager.create_config(["H01.01.08", "--output_format", "json", "--fail_fast"])
        assert dates == ["H01.01.08"]
        assert config.output_format is OutputFormat.JSON
        assert config.fail_fast


class TestMain:
    """main のテスト"""

    def test_iso_output(self, capsys):
        main(["R01.02.03", "明治元年2月3日"])

        out = capsys.readouterr().out.splitlines()
        assert out == ["R01.02.03\t2019-02-03", "明治元年2月3日\t1868-02-03"]

    def test_failure_exits_with_status_1(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["H01.01.08", "bogus"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "H01.01.08\t1989-01-08"
        assert out[1].startswith("bogus\tERROR: ")

    def test_json_output(self, capsys):
        with pytest.raises(SystemExit):
            main(["Ｒ０１．０２．０３", "R01.02.30", "--output_format", "json"])

        document = json.loads(capsys.readouterr().out)
        assert document["summary"] == {"total": 2, "succeeded": 1, "failed": 1}
        assert document["records"][0]["date"] == "2019-02-03"
        assert document["records"][1]["stage"] == "calendar"

    def test_table_output(self, capsys):
        main(["S64.1.7", "--output_format", "table"])

        out = capsys.readouterr().out
        assert "和暦変換結果" in out
        assert "1989-01-07" in out

    def test_input_file(self, tmp_path, capsys):
        input_file = tmp_path / "dates.txt"
        input_file.write_text("# comment\n平成31年4月30日\n", encoding="utf-8")

        main(["R01.05.01", "--input_file", str(input_file)])

        out = capsys.readouterr().out.splitlines()
        assert out == ["R01.05.01\t2019-05-01", "平成31年4月30日\t2019-04-30"]

    def test_no_input_is_configuration_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    def test_fail_fast_stops_before_output(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["bogus", "R01.02.03", "--fail_fast"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "wareki.log"
        with pytest.raises(SystemExit):
            main(["bogus", "--log_file", str(log_file)])

        lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert any(line["event"] == "Conversion failed" and line["source"] == "bogus" for line in lines)
