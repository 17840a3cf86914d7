import unittest

from persistent_heap.Elements import ElementNode, element_nodes, heap_elements, versions
from persistent_heap.heaps import breadth_first
from persistent_heap.HeapNode import EMPTY


class VersionsTests(unittest.TestCase):
    def test_versions(self):
        heaps = versions([5, 3, 8])
        self.assertEqual(len(heaps), 4)
        self.assertIs(heaps[0], EMPTY)
        self.assertEqual([breadth_first(heap) for heap in heaps], [[], [5], [5, 3], [8, 3, 5]])


class ElementsTests(unittest.TestCase):
    def setUp(self):
        self.heaps = versions([5, 3, 8])

    def test_shared_and_rebuilt_nodes(self):
        nodes = element_nodes(self.heaps[3], self.heaps[2])
        self.assertEqual([node.pos for node in nodes], [1, 2, 3])
        self.assertEqual([node.shared for node in nodes], [False, True, False])
        self.assertEqual([node.is_leaf for node in nodes], [False, True, True])
        self.assertEqual([node.side for node in nodes], ["", "L", "R"])

    def test_heap_elements(self):
        elements, complete = heap_elements(self.heaps[3], self.heaps[2])
        self.assertTrue(complete)
        nodes = {e["data"]["id"]: e for e in elements if "id" in e["data"]}
        edges = [e["data"] for e in elements if "source" in e["data"]]
        self.assertEqual(nodes["1"]["classes"], "rebuilt")
        self.assertEqual(nodes["2"]["classes"], "shared is_leaf")
        self.assertEqual(nodes["3"]["classes"], "rebuilt is_leaf")
        self.assertEqual(nodes["1"]["data"]["label"], "8")
        self.assertEqual(edges, [{"source": "1", "target": "2", "label": "L"}, {"source": "1", "target": "3", "label": "R"}])

    def test_full_labels(self):
        elements, _ = heap_elements(self.heaps[3], show_full_labels=True)
        self.assertEqual(elements[0]["data"]["label"], "8 (n=3, h=2)")

    def test_without_previous_everything_is_rebuilt(self):
        self.assertFalse(any(node.shared for node in element_nodes(self.heaps[3])))

    def test_max_elements(self):
        elements, complete = heap_elements(self.heaps[3], max_elements=2)
        self.assertFalse(complete)
        self.assertEqual(len(elements), 3)

    def test_empty(self):
        self.assertEqual(heap_elements(EMPTY), ([], True))

    def test_crop_label(self):
        self.assertEqual(ElementNode.crop_label("123456"), "123456")
        self.assertEqual(ElementNode.crop_label("1234567"), "123...")
