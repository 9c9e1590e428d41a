import json
import unittest

from copurchase_network.models import NetworkData
from copurchase_network.store import GraphStore, LoadError, build_index, load, load_bundled

from network_fixtures import EXAMPLE_DOC, NULL_GROUP_DOC, as_bytes


class LoadTests(unittest.TestCase):
    def test_load_valid_document(self) -> None:
        data = load(as_bytes(EXAMPLE_DOC))
        self.assertIsInstance(data, NetworkData)
        self.assertEqual(len(data.nodes), 3)
        self.assertEqual(len(data.links), 2)
        self.assertEqual(data.metadata.total_nodes, 3)
        self.assertEqual(data.metadata.cleaned_at, "2024-01-01T00:00:00Z")

    def test_load_accepts_str(self) -> None:
        data = load(json.dumps(EXAMPLE_DOC))
        self.assertEqual([n.id for n in data.nodes], [1, 2, 3])

    def test_load_preserves_duplicate_links(self) -> None:
        doc = dict(EXAMPLE_DOC, links=[{"source": 1, "target": 2}, {"source": 1, "target": 2}])
        data = load(as_bytes(doc))
        self.assertEqual(len(data.links), 2)

    def test_empty_input_is_load_error(self) -> None:
        for raw in (None, b"", "   "):
            with self.subTest(raw=raw):
                with self.assertRaises(LoadError):
                    load(raw)

    def test_malformed_json_is_load_error(self) -> None:
        with self.assertRaises(LoadError):
            load(b'{"nodes": [')

    def test_missing_metadata_is_load_error(self) -> None:
        doc = {k: v for k, v in EXAMPLE_DOC.items() if k != "metadata"}
        with self.assertRaises(LoadError):
            load(as_bytes(doc))

    def test_node_with_null_group_loads(self) -> None:
        data = load(as_bytes(NULL_GROUP_DOC))
        self.assertEqual(len(data.nodes), 4)
        self.assertIsNone(data.nodes[3].group)

    def test_invalid_utf8_is_load_error(self) -> None:
        raw = b'{"nodes": [], "links": [], "metadata": {"total_nodes": 0, "total_edges": 0, "cleaned_at": "\xff"}}'
        with self.assertRaises(LoadError):
            load(raw)

    def test_bundled_dataset_loads(self) -> None:
        data = load_bundled()
        self.assertGreater(len(data.nodes), 0)
        self.assertEqual(data.metadata.total_nodes, len(data.nodes))


class GraphStoreTests(unittest.TestCase):
    def test_get_by_id(self) -> None:
        store = GraphStore.from_bytes(as_bytes(EXAMPLE_DOC))
        self.assertEqual(store.get_by_id(2).title, "Gadget")
        self.assertIsNone(store.get_by_id(999))

    def test_duplicate_ids_last_writer_wins(self) -> None:
        doc = dict(
            EXAMPLE_DOC,
            nodes=EXAMPLE_DOC["nodes"] + [{"id": 1, "asin": "A1b", "title": "Widget II", "group": "Toys", "degree": 7}],
        )
        data = load(as_bytes(doc))
        with self.assertLogs("copurchase_network.store", level="WARNING"):
            index = build_index(data.nodes)
        self.assertEqual(index[1].title, "Widget II")
        self.assertEqual(len(index), 3)

    def test_from_bundled(self) -> None:
        store = GraphStore.from_bundled()
        first = store.data.nodes[0]
        self.assertEqual(store.get_by_id(first.id), first)


if __name__ == "__main__":
    unittest.main()
