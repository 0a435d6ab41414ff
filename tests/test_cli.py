"""
Test the jsxlite command line interface
"""

import pytest
import json
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from jsxlite.cli import main
from jsxlite.dsl import Component, Node, Text
from jsxlite.codegen import save_component


@pytest.fixture
def counter_file(tmp_path):
    component = Component(
        name="Counter",
        state={"count": 0},
        children=[
            Node(
                name="button",
                bindings={"onClick": "state.count = state.count + 1"},
                children=[Text(binding="state.count")],
            ),
        ],
    )
    path = tmp_path / "counter.json"
    save_component(component, str(path))
    return path


class TestCompileCommand:
    """Test `jsxlite compile`"""

    def test_compile_to_stdout(self, counter_file, capsys):
        """Test compiling with per-field hooks"""
        exit_code = main(["compile", str(counter_file), "--state-type", "useState", "--no-prettier"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "const [count, setCount] = useState(() => (0));" in out
        assert "export default function Counter(props)" in out

    def test_compile_to_file(self, counter_file, tmp_path):
        """Test writing the result to a file"""
        output = tmp_path / "out" / "Counter.jsx"

        exit_code = main(["compile", str(counter_file), "--no-prettier", "-o", str(output)])

        assert exit_code == 0
        assert "useLocalObservable" in output.read_text(encoding="utf-8")

    def test_invalid_component(self, tmp_path, capsys):
        """Test compiler errors are reported"""
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({
            "name": "Broken",
            "children": [{"name": "For", "bindings": {"each": "items"}}],
        }), encoding="utf-8")

        exit_code = main(["compile", str(path), "--no-prettier"])

        assert exit_code == 1
        assert "_forName" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        """Test unreadable input is reported"""
        exit_code = main(["compile", str(tmp_path / "missing.json"), "--no-prettier"])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_strategy(self, counter_file):
        """Test argparse rejects unknown strategies"""
        with pytest.raises(SystemExit):
            main(["compile", str(counter_file), "--state-type", "redux"])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
