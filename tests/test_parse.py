import unittest

from jobfeed.core.parse import parse_document
from jobfeed.errors import MalformedDocument

from feed_samples import DEEP_FEED, SAMPLE_FEED, SINGLE_JOB_FEED


class ParseDocumentTests(unittest.TestCase):
    def test_repeated_tags_become_lists(self):
        tree = parse_document(SAMPLE_FEED)
        jobs = tree["outertag"]["jobs"]["job"]
        self.assertIsInstance(jobs, list)
        self.assertEqual(len(jobs), 3)
        self.assertEqual(jobs[1]["title"], "Senior Data Engineer")

    def test_single_child_is_not_wrapped(self):
        tree = parse_document(SINGLE_JOB_FEED)
        self.assertIsInstance(tree["outertag"]["jobs"]["job"], dict)

    def test_numeric_text_is_not_coerced(self):
        tree = parse_document(SAMPLE_FEED)
        self.assertEqual(tree["outertag"]["jobs"]["job"][2]["jobdivaid"], "00731")

    def test_cdata_kept_verbatim(self):
        tree = parse_document(SAMPLE_FEED)
        desc = tree["outertag"]["jobs"]["job"][0]["jobdescription_400char"]
        self.assertEqual(desc, "Kofax &amp; KTA developer &middot; 8+ years")

    def test_attributes_merge_without_prefix(self):
        tree = parse_document('<jobs><job jobdivaid="42" type="remote"><title>T</title></job></jobs>')
        self.assertEqual(tree["jobs"]["job"], {"jobdivaid": "42", "type": "remote", "title": "T"})

    def test_mixed_text_is_kept_under_text_key(self):
        tree = parse_document('<root><title lang="en">Engineer</title></root>')
        self.assertEqual(tree["root"]["title"], {"lang": "en", "#text": "Engineer"})

    def test_empty_element_is_empty_string(self):
        self.assertEqual(parse_document("<outertag><jobs></jobs></outertag>"), {"outertag": {"jobs": ""}})

    def test_same_input_same_tree(self):
        self.assertEqual(parse_document(SAMPLE_FEED), parse_document(SAMPLE_FEED))

    def test_child_element_wins_over_attribute(self):
        tree = parse_document('<jobs><job title="attr"><title>Child</title><city>X</city></job></jobs>')
        self.assertEqual(tree["jobs"]["job"], {"title": "Child", "city": "X"})

    def test_deep_nesting_raises_malformed(self):
        with self.assertRaises(MalformedDocument):
            parse_document(DEEP_FEED)
        with self.assertRaises(MalformedDocument):
            parse_document("<a><b><c><d>x</d></c></b></a>", max_depth=2)

    def test_nesting_within_limit(self):
        tree = parse_document("<a><b><c><d>x</d></c></b></a>", max_depth=3)
        self.assertEqual(tree, {"a": {"b": {"c": {"d": "x"}}}})

    def test_malformed_raises(self):
        with self.assertRaises(MalformedDocument):
            parse_document("<outertag><jobs>")
        with self.assertRaises(MalformedDocument):
            parse_document("   ")


if __name__ == "__main__":
    unittest.main()
