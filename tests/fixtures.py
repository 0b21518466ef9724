# type: ignore
import pytest

import svm.runtime.cpu as cpu
from svm.common.hwconf import HALT_SIGNAL


@pytest.fixture
def with_cpu():
    proc = cpu.CPU()
    proc.define_handler(HALT_SIGNAL, cpu.signal_halt)
    yield proc
