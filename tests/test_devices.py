import io

from hcsbench.devices import (
    CudaDeviceProperties,
    LibSupport,
    cuda_device_count,
    get_device_properties,
    is_cuda_supported,
    print_device_properties,
    write_gpu_specs,
)


def test_cuda_is_not_supported():
    assert is_cuda_supported() is False
    assert cuda_device_count() == 0


def test_device_properties_uninitialized():
    props = get_device_properties(0)
    assert props.is_initialized is False
    assert props.describe() == "CudaDeviceProperties object is not initialized!"


def test_bandwidth_uses_whole_bytes_of_bus():
    a = CudaDeviceProperties(memory_clock_rate=2505000, memory_bus_width=384)
    b = CudaDeviceProperties(memory_clock_rate=2505000, memory_bus_width=390)
    assert a.peak_memory_bandwidth_gbs() == b.peak_memory_bandwidth_gbs()
    assert a.peak_memory_bandwidth_gbs() > 0


def test_bandwidth_zero_for_narrow_bus():
    props = CudaDeviceProperties(memory_clock_rate=1000, memory_bus_width=7)
    assert props.peak_memory_bandwidth_gbs() == 0.0


def test_describe_initialized_lists_fields():
    props = CudaDeviceProperties(is_initialized=True, name="TestDevice", warp_size=32)
    lines = props.describe().split("\n")
    assert lines[2] == "Name:                          TestDevice"
    assert "Warp size:                     32" in lines
    assert len(lines) == 14
    assert lines[-1].startswith("Peak Memory Bandwidth (GB/s):   ")


def test_print_device_properties_without_cuda():
    out = io.StringIO()
    print_device_properties(0, out)
    assert out.getvalue() == "printDevProp(): CUDA is not supported!\n"


def test_write_gpu_specs_without_cuda():
    out = io.StringIO()
    write_gpu_specs(out)
    assert out.getvalue() == "printDevProp(): CUDA is not supported!\n"


def test_lib_support_describe():
    assert LibSupport(False, False).describe() == "Supported libs: "
    assert LibSupport(True, True).describe() == "Supported libs: OpenMP CUDA "
    assert LibSupport(False, True).describe() == "Supported libs: CUDA "


def test_lib_support_detect():
    support = LibSupport.detect()
    assert support.is_cuda is False
    assert support.is_openmp is True
    assert support.describe() == "Supported libs: OpenMP "