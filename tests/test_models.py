"""Tests for data models."""

from pathlib import Path

import pytest

from vcf_ingest.models import GenomeInfo, RecordCollection, SampleBatch, VariantRecord, genome_label


def make_collection(name: str, *records: VariantRecord) -> RecordCollection:
    return RecordCollection(source=Path(f"{name}.vcf"), records=list(records))


class TestRecordCollection:
    """Tests for RecordCollection."""

    def test_sequence_protocol(self) -> None:
        records = [VariantRecord("chr1", 1, "A", ("G",)), VariantRecord("chr2", 2, "C", ("T",))]
        collection = make_collection("a", *records)

        assert len(collection) == 2
        assert list(collection) == records
        assert collection[1] is records[1]
        assert records[0] in collection

    def test_slice_keeps_origin(self) -> None:
        collection = RecordCollection(
            source=Path("a.vcf"),
            genome="hg19",
            records=[VariantRecord("chr1", i, "A", ("G",)) for i in range(5)],
        )

        sliced = collection[1:3]

        assert isinstance(sliced, RecordCollection)
        assert [r.pos for r in sliced] == [1, 2]
        assert sliced.genome == "hg19"

    def test_seqnames_first_seen_order(self) -> None:
        collection = make_collection(
            "a",
            VariantRecord("chr2", 1, "A", ("G",)),
            VariantRecord("chr1", 2, "A", ("G",)),
            VariantRecord("chr2", 3, "A", ("G",)),
        )
        assert collection.seqnames() == ["chr2", "chr1"]


class TestGenomeInfo:
    """Tests for GenomeInfo."""

    def test_membership(self) -> None:
        genome = GenomeInfo(genome="hg19", seqnames=("chr1", "chr2"), seqlengths=(249250621, 243199373))
        assert "chr1" in genome
        assert "chr3" not in genome

    def test_mismatched_lengths(self) -> None:
        with pytest.raises(ValueError, match="seqlengths has 1 entries"):
            GenomeInfo(genome="hg19", seqnames=("chr1", "chr2"), seqlengths=(1,))

    def test_genome_label(self) -> None:
        assert genome_label("hg38") == "hg38"
        assert genome_label(GenomeInfo(genome="GRCh37", seqnames=("1",))) == "GRCh37"


class TestSampleBatch:
    """Tests for SampleBatch."""

    @pytest.fixture
    def batch(self) -> SampleBatch:
        return SampleBatch(
            ["liver1", "colon1"],
            [
                make_collection("liver1", VariantRecord("chr1", 10, "A", ("G",), "rs1")),
                make_collection(
                    "colon1",
                    VariantRecord("chr2", 20, "C", ("T",)),
                    VariantRecord("chrX", 30, "G", ("A",)),
                ),
            ],
        )

    def test_order_follows_names(self, batch: SampleBatch) -> None:
        assert list(batch) == ["liver1", "colon1"]
        assert batch["colon1"].source == Path("colon1.vcf")

    def test_read_only(self, batch: SampleBatch) -> None:
        with pytest.raises(TypeError):
            batch["new"] = make_collection("new")  # type: ignore[index]

    def test_total_records(self, batch: SampleBatch) -> None:
        assert batch.total_records == 3

    def test_repr(self, batch: SampleBatch) -> None:
        assert repr(batch) == "SampleBatch(liver1=1, colon1=2)"

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            SampleBatch(["a", "a"], [make_collection("a"), make_collection("b")])

    def test_rejects_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            SampleBatch(["a"], [])

    def test_to_frame(self, batch: SampleBatch) -> None:
        frame = batch.to_frame()

        assert list(frame.columns) == ["sample", "chrom", "pos", "id", "ref", "alt"]
        assert frame["sample"].tolist() == ["liver1", "colon1", "colon1"]
        assert frame["chrom"].tolist() == ["chr1", "chr2", "chrX"]
        assert frame.loc[0, "id"] == "rs1"

    def test_to_frame_empty(self) -> None:
        frame = SampleBatch(["a"], [make_collection("a")]).to_frame()
        assert frame.empty
        assert "sample" in frame.columns
