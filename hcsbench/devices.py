"""GPU device description and detection of the available summation backends."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

_NOT_SUPPORTED = "printDevProp(): CUDA is not supported!"


def _fmt(value: float) -> str:
    """Format a float the way a default-precision stream would."""
    return f"{value:g}"


@dataclass
class CudaDeviceProperties:
    """Parameters of a CUDA device; ``is_initialized`` is False when unknown."""

    is_initialized: bool = False
    major: int = 0
    minor: int = 0
    name: str = ""
    total_global_mem: int = 0
    shared_memory_per_block: int = 0
    regs_per_block: int = 0
    warp_size: int = 0
    mem_pitch: int = 0
    max_threads_per_block: int = 0
    multi_processor_count: int = 0
    device_overlap: bool = False
    async_engine_count: int = 0
    memory_clock_rate: int = 0  # KHz
    memory_bus_width: int = 0  # bits

    def peak_memory_bandwidth_gbs(self) -> float:
        """Peak memory bandwidth in GB/s (double data rate, whole bytes of bus)."""
        return 2.0 * self.memory_clock_rate * (self.memory_bus_width // 8) / 1.0e6

    def describe(self) -> str:
        """Human-readable listing of the device parameters."""
        if not self.is_initialized:
            return "CudaDeviceProperties object is not initialized!"
        rows = [
            ("Major revision number:         ", self.major),
            ("Minor revision number:         ", self.minor),
            ("Name:                          ", self.name),
            ("Total global memory:           ", self.total_global_mem),
            ("Total shared memory per block: ", self.shared_memory_per_block),
            ("Total registers per block:     ", self.regs_per_block),
            ("Warp size:                     ", self.warp_size),
            ("Maximum memory pitch:          ", self.mem_pitch),
            ("Maximum threads per block:     ", self.max_threads_per_block),
            ("Number of multiprocessors:     ", self.multi_processor_count),
            ("Number of asynchronous engines: ", self.async_engine_count),
            ("Memory Clock Rate (KHz):        ", self.memory_clock_rate),
            ("Memory Bus Width (bits):        ", self.memory_bus_width),
            ("Peak Memory Bandwidth (GB/s):   ", _fmt(self.peak_memory_bandwidth_gbs())),
        ]
        return "\n".join(f"{label}{value}" for label, value in rows)


@dataclass
class LibSupport:
    """Which parallel backends are available."""

    is_openmp: bool = False
    is_cuda: bool = False

    @classmethod
    def detect(cls) -> "LibSupport":
        """Report the backends this installation provides.

        The parallel-for reduction is always available; CUDA never is.
        """
        return cls(is_openmp=True, is_cuda=is_cuda_supported())

    def describe(self) -> str:
        parts = ["Supported libs: "]
        if self.is_openmp:
            parts.append("OpenMP ")
        if self.is_cuda:
            parts.append("CUDA ")
        return "".join(parts)


def is_cuda_supported() -> bool:
    """CUDA kernels are not available to this package."""
    return False


def cuda_device_count() -> int:
    """Number of CUDA-capable devices that can be used."""
    return 0


def get_device_properties(device_id: int = 0) -> CudaDeviceProperties:
    """Properties of the given device; uninitialized when it cannot be queried."""
    return CudaDeviceProperties()


def print_device_properties(device_id: int = 0, out: TextIO | None = None) -> None:
    """Write the properties of the given device, or why they are unavailable."""
    stream = sys.stdout if out is None else out
    props = get_device_properties(device_id)
    if not props.is_initialized:
        stream.write(_NOT_SUPPORTED + "\n")
        return
    stream.write(f"\nCUDA Device #{device_id}\n")
    stream.write(props.describe() + "\n")


def write_gpu_specs(out: TextIO) -> None:
    """Write the specifications of all devices to ``out``."""
    count = cuda_device_count()
    if count == 0:
        out.write(_NOT_SUPPORTED + "\n")
        return
    out.write("WriteGpuSpecs()\n")
    for device_id in range(count):
        props = get_device_properties(device_id)
        out.write(f"Device Number: {device_id}\n")
        out.write(f"  Device name: {props.name}\n")
        out.write(f"  Compute capability: {props.major}.{props.minor}\n")
        out.write(f"  MultiProcessorCount: {props.multi_processor_count}\n")
        out.write(
            f"  asyncEngineCount: {props.async_engine_count}"
            " (Number of asynchronous engines)\n"
        )
        out.write(f"  Memory Clock Rate (KHz): {props.memory_clock_rate}\n")
        out.write(f"  Memory Bus Width (bits): {props.memory_bus_width}\n")
        out.write(
            f"  Peak Memory Bandwidth (GB/s): {_fmt(props.peak_memory_bandwidth_gbs())}\n"
        )