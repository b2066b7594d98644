"""
Tests for cli.py - Command line interface.
"""

import json

import pytest

from modoshi.cli import format_result, main
from modoshi.transformer import TraceFrame, TransformedText


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        """Test version flag."""
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'modoshi' in captured.out
        assert '0.1.0' in captured.out

    def test_help(self, capsys):
        """Test help flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'dictionary forms' in captured.out

    def test_no_args(self, capsys):
        """Test running with no arguments."""
        result = main([])
        assert result == 1

    def test_unknown_language(self, capsys):
        result = main(['-l', 'xx', 'text'])
        assert result == 1
        assert "unknown language 'xx'" in capsys.readouterr().err

    def test_list_languages(self, capsys):
        assert main(['--list-languages']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split('\t') == ['ja', 'jpn', 'Japanese', '読め']
        assert len(lines) == 3


class TestCLIOutput:
    """Tests for candidate output."""

    def test_format_result(self):
        result = TransformedText('食べる', 3, (
            TraceFrame('causative', 0, '食べさせる'),
            TraceFrame('negative', 1, '食べさせない'),
        ))
        assert format_result(result) == '食べる « causative « negative'
        assert format_result(TransformedText('食べる')) == '食べる'

    def test_text_output(self, capsys):
        assert main(['食べさせない']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == '食べさせない'
        assert '食べる « causative « negative' in lines

    def test_dictionary_forms_only_by_default(self, capsys):
        main(['-l', 'ja', '食べました'])
        default = capsys.readouterr().out.splitlines()
        main(['-l', 'ja', '-a', '食べました'])
        everything = capsys.readouterr().out.splitlines()
        assert '食べます « -た' not in default
        assert '食べます « -た' in everything
        assert len(everything) > len(default)

    def test_json_output(self, capsys):
        assert main(['-l', 'en', '-j', 'walked']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0] == {
            'source': 'walked', 'text': 'walked', 'conditions': 0, 'reasons': [], 'trace': [],
        }
        walk = data[1]
        assert walk['text'] == 'walk'
        assert walk['reasons'] == ['past']
        assert walk['trace'] == [{'transform': 'past', 'ruleIndex': 0, 'text': 'walked'}]

    def test_max_results(self, capsys):
        assert main(['-l', 'en', '-a', '-n', '2', 'walked']) == 0
        assert capsys.readouterr().out.splitlines() == ['walked', 'walk « past']

    def test_max_results_one(self, capsys):
        assert main(['-l', 'en', '-a', '-n', '1', 'walked']) == 0
        assert capsys.readouterr().out.splitlines() == ['walked']

    def test_negative_max_results_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['-n', '-1', 'walked'])
        assert exc_info.value.code == 2
        assert 'must be 0 or positive' in capsys.readouterr().err

    def test_preprocess(self, capsys):
        """Half-width input only reaches the dictionary form after preprocessing."""
        main(['ﾀﾍﾞﾀ'])
        assert 'タベル « -た' not in capsys.readouterr().out
        main(['-p', 'ﾀﾍﾞﾀ'])
        assert 'たべる « -た' in capsys.readouterr().out.splitlines()

    def test_multiple_words_are_joined(self, capsys):
        assert main(['-l', 'en', 'looked', 'up']) == 0
        assert 'look up « past' in capsys.readouterr().out.splitlines()
