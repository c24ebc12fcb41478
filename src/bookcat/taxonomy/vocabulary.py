"""Domain vocabularies used by overrides and cross-category adjustments.

Terms match on word edges, so ``row`` never fires inside ``growth`` and
``api`` never fires inside ``capital``.
"""

from __future__ import annotations

from bookcat.taxonomy.matching import compile_vocabulary

# Database vocabulary strong enough to settle a book as Technology outright.
SQL_VOCABULARY = compile_vocabulary(
    r"sql",
    r"databases?",
    r"mysql",
    r"postgresql",
    r"postgres",
    r"sqlite",
    r"oracle",
    r"mariadb",
    r"sql server",
    r"t-?sql",
    r"pl/?sql",
    r"nosql",
    r"mongodb",
    r"data warehouses?",
    r"olap",
    r"etl",
    r"index(?:es)?",
    r"joins?",
    r"group by",
    r"order by",
    r"primary keys?",
    r"foreign keys?",
    r"normali[sz]ation",
    r"schemas?",
    r"tables?",
    r"columns?",
    r"rows?",
    r"triggers?",
    r"stored procedures?",
)

# Programming vocabulary that blocks the business and psychology overrides.
STRONG_TECH_VOCABULARY = compile_vocabulary(
    r"sql",
    r"databases?",
    r"programming",
    r"coding",
    r"software",
    r"computers?",
    r"javascript",
    r"python",
    r"java",
    r"c\+\+",
    r"c#",
    r"typescript",
    r"algorithms?",
    r"apis?",
    r"backend",
    r"frontend",
)

STRONG_BUSINESS_VOCABULARY = compile_vocabulary(
    r"fastlane",
    r"fast lane",
    r"millionaires?",
    r"billionaires?",
    r"wealth\w*",
    r"financial freedom",
    r"cashflow quadrant",
    r"unscripted",
    r"entrepreneurship",
    r"entrepreneurs?",
    r"rich dad",
    r"poor dad",
    r"money game",
    r"side hustles?",
    r"build wealth",
    r"passive income",
)

MINDSET_VOCABULARY = compile_vocabulary(
    r"how to change your mind",
    r"change your mind",
    r"change your mindset",
    r"mindsets?",
    r"cognitive",
    r"psychology",
    r"behavior change",
    r"behavioral",
    r"habits?",
    r"neuro\w*",
    r"brains?",
    r"consciousness",
    r"psychedelics?",
    r"psilocybin",
    r"lsd",
)

# Hard-science-of-mind terms: tip a mindset book towards Psychology.
MIND_SCIENCE_VOCABULARY = compile_vocabulary(
    r"psychedelics?",
    r"psilocybin",
    r"lsd",
    r"neuro\w*",
    r"brains?",
    r"consciousness",
    r"cognitive",
    r"psychology",
)

TECH_FLAG_VOCABULARY = compile_vocabulary(
    r"sql",
    r"databases?",
    r"mysql",
    r"postgresql",
    r"postgres",
    r"sqlite",
    r"oracle",
    r"programming",
    r"coding",
    r"software",
    r"computers?",
    r"algorithms?",
    r"data structures?",
    r"apis?",
    r"backend",
    r"frontend",
    r"javascript",
    r"python",
    r"java",
    r"c\+\+",
    r"c#",
    r"typescript",
)

BUSINESS_FLAG_VOCABULARY = compile_vocabulary(
    r"entrepreneurs?",
    r"entrepreneurship",
    r"business(?:es)?",
    r"finance",
    r"financial",
    r"money",
    r"wealth\w*",
    r"millionaires?",
    r"fastlane",
    r"fast lane",
    r"billionaires?",
    r"start-?ups?",
    r"invest\w*",
    r"capital",
    r"roi",
    r"cash ?flow",
)

PSYCHOLOGY_FLAG_VOCABULARY = compile_vocabulary(
    r"mindsets?",
    r"psychology",
    r"behaviou?r\w*",
    r"habits?",
    r"brains?",
    r"cognitive",
    r"consciousness",
    r"mental\w*",
    r"psychedelics?",
    r"psilocybin",
    r"lsd",
)

GUIDE_STYLE_VOCABULARY = compile_vocabulary(
    r"how to",
    r"guides?",
    r"habits?",
    r"mindsets?",
)
