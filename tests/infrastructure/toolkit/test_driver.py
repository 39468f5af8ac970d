"""
Unit tests for the BART subprocess driver.

The ``bart`` process is replaced by a fake ``subprocess.run`` so these tests
run without a BART installation.

These tests validate that:
- arguments are converted (arrays become temporary ``.ra`` files)
- temporary files are removed on success and on failure
- non-zero exit statuses raise BartError carrying the cleaned diagnostics
- standard output is forwarded to a consumer or logged
- run() appends an output file, loads it and labels its axes
"""

import subprocess
import unittest
from pathlib import Path
from unittest import mock

import numpy as np

from bartnd import BartDims, BartError, ComplexFloatNDArray, execute, load, read, run, save

_DRIVER = "bartnd.infrastructure.toolkit._driver"
_EXE = Path("/opt/bart/bart")


def _completed(argv, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(argv, returncode, stdout=stdout, stderr=stderr)


class _DriverTestCase(unittest.TestCase):
    def setUp(self):
        finder = mock.patch(f"{_DRIVER}.find_bart_executable", return_value=_EXE)
        self.find = finder.start()
        self.addCleanup(finder.stop)

    def patch_run(self, side_effect):
        patcher = mock.patch(f"{_DRIVER}.subprocess.run", side_effect=side_effect)
        fake = patcher.start()
        self.addCleanup(patcher.stop)
        return fake


class TestExecute(_DriverTestCase):
    def test_arguments_and_temp_file_lifetime(self):
        a = ComplexFloatNDArray.of([[1, 2j], [3, 4]])
        seen = {}

        def fake_run(argv, **kwargs):
            seen["argv"] = argv
            seen["kwargs"] = kwargs
            seen["input"] = load(argv[4])
            return _completed(argv)

        self.patch_run(fake_run)
        execute("fft", "-u", 7, a, "image.ra")

        argv = seen["argv"]
        self.assertEqual(argv[:4], [str(_EXE), "fft", "-u", "7"])
        self.assertEqual(argv[5], "image.ra")
        self.assertTrue(argv[4].endswith(".ra"))
        self.assertFalse(Path(argv[4]).exists())
        self.assertEqual(seen["input"], a)
        self.assertTrue(seen["kwargs"]["capture_output"])
        self.assertFalse(seen["kwargs"]["check"])

    def test_failure_raises_with_diagnostics(self):
        a = ComplexFloatNDArray(3)
        paths = []

        def fake_run(argv, **kwargs):
            paths.append(argv[2])
            return _completed(argv, returncode=1, stderr="\x1b[31mError: bad input\x1b[0m\r\n")

        self.patch_run(fake_run)
        with self.assertRaises(BartError) as ctx:
            execute("cabs", a)
        self.assertEqual(ctx.exception.returncode, 1)
        self.assertEqual(ctx.exception.diagnostics, "Error: bad input")
        self.assertFalse(Path(paths[0]).exists())

    def test_start_failure_is_reported_as_bart_error(self):
        self.patch_run(FileNotFoundError("no such file"))
        with self.assertRaises(BartError):
            execute("version")

    def test_output_consumer(self):
        self.patch_run(lambda argv, **kw: _completed(argv, stdout="\x1b[1mline 1\x1b[0m\r\n  line 2 \n"))
        lines = []
        execute("version", output_consumer=lines.append)
        self.assertEqual(lines, ["line 1", "line 2"])

    def test_output_is_logged_by_default(self):
        self.patch_run(lambda argv, **kw: _completed(argv, stdout="v0.9.00\n"))
        with self.assertLogs(_DRIVER, level="INFO") as logs:
            execute("version")
        self.assertIn("v0.9.00", "\n".join(logs.output))

    def test_explicit_executable_is_forwarded(self):
        self.patch_run(lambda argv, **kw: _completed(argv))
        execute("version", executable="/somewhere/bart")
        self.find.assert_called_once_with("/somewhere/bart")

    def test_unsupported_argument(self):
        fake = self.patch_run(lambda argv, **kw: _completed(argv))
        for bad in (object(), True, [1, 2]):
            with self.subTest(arg=bad):
                with self.assertRaises(TypeError):
                    execute("scale", bad)
        fake.assert_not_called()


class TestRead(_DriverTestCase):
    def test_returns_stripped_stdout(self):
        self.patch_run(lambda argv, **kw: _completed(argv, stdout="\n 0 1 2 \n\n"))
        self.assertEqual(read("bitmask", "-b", 7), "0 1 2")


class TestRun(_DriverTestCase):
    def test_loads_and_labels_output(self):
        result_values = np.arange(6, dtype=np.complex64).reshape(2, 3)
        paths = []

        def fake_run(argv, **kwargs):
            paths.append(argv[-1])
            save(argv[-1], ComplexFloatNDArray.from_numpy(result_values))
            return _completed(argv)

        self.patch_run(fake_run)
        out = run("ones", 2, 2, 3)

        self.assertEqual(out.shape, (2, 3))
        self.assertEqual(out.bart_dims, (BartDims.READ, BartDims.PHS1))
        np.testing.assert_array_equal(out.to_numpy(), result_values)
        self.assertFalse(Path(paths[0]).exists())

    def test_failure_removes_output_file(self):
        paths = []

        def fake_run(argv, **kwargs):
            paths.append(argv[-1])
            return _completed(argv, returncode=2, stderr="usage")

        self.patch_run(fake_run)
        with self.assertRaises(BartError):
            run("ones")
        self.assertFalse(Path(paths[0]).exists())


if __name__ == "__main__":
    unittest.main()
