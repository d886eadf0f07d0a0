"""
Sample shareholder letter passages for development and demos.

These are paraphrased themes, NOT authentic letter text. They are only
served when a letter PDF is missing outside production.
"""

from typing import Dict, List

DEFAULT_SAMPLE_YEAR = "2022"

SAMPLE_PASSAGES: Dict[str, List[str]] = {
    "2023": [
        "To the Shareholders of Berkshire Hathaway Inc.: Charlie Munger and I have the good fortune "
        "to work with a truly exceptional group of managers. These individuals run their operations "
        "with autonomy and dedication that would make any CEO proud. At Berkshire, our managers know "
        "that they will not be second-guessed by headquarters so long as their business strategies "
        "make sense, their conduct is ethical, and their communications with us are transparent. "
        "Our hands-off approach allows these talented individuals to maximize the potential of "
        "their operations.",
        "We continue to focus on businesses with enduring competitive advantages, or what we call "
        "economic moats. These businesses possess pricing power, cost advantages, high switching "
        "costs, or other attributes that protect them from competition. We prefer companies that can "
        "grow their earnings while requiring minimal capital investment. This approach has served us "
        "well over the decades and remains central to our investment philosophy.",
        "The key to successful investing is understanding that you're buying a piece of a business, "
        "not a stock symbol. When we invest in a company, we think like owners, not traders. We want "
        "to own businesses that we can understand, that have predictable cash flows, and that are "
        "managed by competent and honest people. This approach may seem simple, but it's "
        "surprisingly difficult to execute consistently.",
    ],
    "2022": [
        "Cryptocurrency and digital assets continue to capture headlines, but we remain skeptical of "
        "their intrinsic value. These assets produce nothing - they don't generate cash flows, create "
        "products, or provide services. They are essentially speculative instruments that derive "
        "their value solely from the hope that someone else will pay more for them tomorrow. This "
        "violates our fundamental investment principles of buying productive assets at reasonable "
        "prices.",
        "American business has been the primary driver of our country's prosperity over the past "
        "century. Despite periodic setbacks, recessions, and market volatility, the long-term "
        "trajectory of American enterprise remains remarkably positive. We continue to believe that "
        "betting against America has been, and will continue to be, a mistake. Our diversified "
        "portfolio of American businesses reflects this conviction.",
        "Management quality is perhaps the most important factor in our investment decisions. We look "
        "for leaders who think like owners, allocate capital wisely, and maintain the highest ethical "
        "standards. These individuals should be able to explain their businesses clearly and honestly "
        "to shareholders. When we find such leaders running excellent businesses at reasonable prices, "
        "we try to become long-term partners with them.",
    ],
    "2021": [
        "The pandemic tested businesses worldwide, revealing both strengths and vulnerabilities in "
        "different industries. Our decentralized structure and diverse portfolio helped us weather "
        "this unprecedented challenge. While some of our businesses suffered, others thrived. This "
        "diversification, combined with our strong balance sheet, allowed us to continue investing "
        "for the long term even during uncertain times.",
        "Market volatility creates opportunities for patient investors with permanent capital. During "
        "periods of widespread pessimism, we often find excellent businesses trading at attractive "
        "prices. Our ability to act decisively during these periods, without the pressure of "
        "quarterly performance metrics or fund redemptions, gives us a significant advantage over "
        "many other investors.",
        "We remain committed to our acquisition strategy of buying entire businesses rather than just "
        "stock positions. When we acquire companies, we provide stability and permanence that appeals "
        "to many business owners. We promise minimal interference with successful operations while "
        "providing access to Berkshire's financial strength and resources.",
    ],
}


def get_sample_passages(year: str) -> List[str]:
    """Sample passages for a year, or the default year's passages."""
    return list(SAMPLE_PASSAGES.get(year, SAMPLE_PASSAGES[DEFAULT_SAMPLE_YEAR]))
