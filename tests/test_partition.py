import pytest

from imgbench.runners.parallel import partition_paths


def _paths(count):
    return [f"images/{index}.jpg" for index in range(count)]


@pytest.mark.parametrize("strategy", ["contiguous", "balanced"])
@pytest.mark.parametrize("count", [0, 1, 2, 5, 10, 13])
@pytest.mark.parametrize("workers", [1, 2, 4, 7, 10])
def test_chunks_cover_input_once_in_order(strategy, count, workers):
    paths = _paths(count)
    chunks = partition_paths(paths, workers, strategy)
    assert [path for chunk in chunks for path in chunk] == paths
    assert all(chunk for chunk in chunks)


def test_contiguous_last_chunk_absorbs_remainder():
    chunks = partition_paths(_paths(10), 4)
    assert [len(chunk) for chunk in chunks] == [2, 2, 2, 4]


@pytest.mark.parametrize("count,workers", [(13, 2), (13, 4), (10, 7), (23, 10)])
def test_contiguous_chunk_sizes(count, workers):
    chunk_size, remainder = divmod(count, workers)
    sizes = [len(chunk) for chunk in partition_paths(_paths(count), workers)]
    assert sizes[:-1] == [chunk_size] * (workers - 1)
    assert sizes[-1] == chunk_size + remainder


def test_contiguous_even_split():
    chunks = partition_paths(_paths(8), 4)
    assert chunks == [_paths(8)[i : i + 2] for i in range(0, 8, 2)]


@pytest.mark.parametrize("count,workers", [(2, 10), (3, 7), (1, 2)])
def test_more_workers_than_paths_gives_singletons(count, workers):
    chunks = partition_paths(_paths(count), workers)
    assert len(chunks) == count
    assert all(len(chunk) == 1 for chunk in chunks)


def test_two_images_two_workers():
    assert partition_paths(["images/a.jpg", "images/b.png"], 2) == [
        ["images/a.jpg"],
        ["images/b.png"],
    ]


def test_single_worker_gets_everything():
    assert partition_paths(_paths(5), 1) == [_paths(5)]


def test_empty_input_gives_no_chunks():
    assert partition_paths([], 4) == []


def test_balanced_spreads_remainder():
    chunks = partition_paths(_paths(10), 4, "balanced")
    assert [len(chunk) for chunk in chunks] == [3, 3, 2, 2]


def test_balanced_never_exceeds_worker_count():
    assert len(partition_paths(_paths(3), 10, "balanced")) == 3
    assert len(partition_paths(_paths(23), 10, "balanced")) == 10


@pytest.mark.parametrize("workers", [0, -3])
def test_invalid_worker_count(workers):
    with pytest.raises(ValueError):
        partition_paths(_paths(4), workers)


def test_unknown_strategy():
    with pytest.raises(ValueError):
        partition_paths(_paths(4), 2, "round_robin")
