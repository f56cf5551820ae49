"""ATS vocabulary for keyword extraction.

Curated terms for faculty and higher-education postings, plus the stopwords
dropped before frequency ranking.
"""

# Matched against single lowercased tokens, so multi-word and mixed-case
# entries ("instructional design", "STEM") never match. Kept verbatim.
ATS_VOCABULARY = frozenset(
    {
        "adjunct",
        "faculty",
        "professor",
        "tenure",
        "curriculum",
        "syllabus",
        "instructional design",
        "higher education",
        "assessment",
        "teaching",
        "pedagogy",
        "research",
        "graduate",
        "undergraduate",
        "accreditation",
        "learning outcomes",
        "student success",
        "academic advising",
        "STEM",
        "liberal arts",
        "education policy",
        "course development",
        "PhD",
        "EdD",
        "leadership",
        "diversity",
        "inclusion",
        "mentorship",
        "equity",
        "collaboration",
        "student engagement",
        "online teaching",
        "hybrid learning",
    }
)

STOPWORDS = frozenset(
    {
        "the",
        "and",
        "for",
        "with",
        "that",
        "this",
        "will",
        "are",
        "have",
        "not",
        "all",
        "can",
        "but",
        "more",
        "some",
    }
)
