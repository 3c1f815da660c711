"""Static token registry.

Keys are Marginfi bank addresses; Kamino reserves are looked up by the
token mint (token_address).
"""

from dataclasses import dataclass
from typing import Dict, Optional

from config.settings import Settings, get_settings


@dataclass(frozen=True)
class TokenData:
    """Token metadata from the static registry."""

    category: str
    token_address: str
    token_symbol: str


SOL = TokenData("LST", "So11111111111111111111111111111111111111112", "SOL")
USDC = TokenData("Stable", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v", "USDC")

FULL_TOKEN_TABLE: Dict[str, TokenData] = {
    "CCKtUs6Cgwo4aaQUmBPmyoApH2gUDErxNZCAntD6LYGh": SOL,
    "2s37akK2eyBbp8DZgCm7RtsaEz8eJP3Nxd4urLHQv7yB": USDC,
    "Dj2CwMF3GM7mMT5hcyGXKuYSQ2kQ5zaVCkA1zX1qaTva": TokenData(
        "Stable", "2u1tszSeqZ3qBWF3uNGPFc8TzMk2tdiwknnRMWGWjGWH", "USDG"
    ),
    "FDsf8sj6SoV313qrA91yms3u5b3P4hBxEPvanVs8LtJV": TokenData(
        "Stable", "USDSwr9ApdHk5bvJKMjzff41FfuX8bSxdKcR81vTwcA", "USDS"
    ),
    "8UEiPmgZHXXEDrqLS3oiTxQxTbeYTtPbeMBxAd2XGbpu": TokenData(
        "Stable", "2b1kV6DkPAnxd5ixfnxCpjxmKwqjjaYmCZfHsFu24GXo", "PYUSD"
    ),
    "GJCi1uj3kYPZ64puA5sLUiCQfFapxT2xnREzrbDzFkYY": TokenData(
        "LST", "he1iusmfkpAdwvxLNGV8Y1iSbj4rUy6yMhEA3fotn9A", "hSOL"
    ),
    "8LaUZadNqtzuCG7iCvZd7d5cbquuYfv19KjAg6GPuuCb": TokenData(
        "LST", "jupSoLaHXQiZZTSfEWMTRRgpnyFm8f6sZdosWBjx93v", "jupSOL"
    ),
    "BeNBJrAh1tZg5sqgt8D6AWKJLD5KkBrfZvtcgd7EuiAR": TokenData(
        "Stable", "7kbnvuGBxxj8AG9qp8Scn56muWGaRaFqxg1FsRp3PaFT", "UXD"
    ),
    "HmpMfL8942u22htC4EMiWgLX931g3sacXFR6KjuLgKLV": TokenData(
        "Stable", "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB", "USDT"
    ),
    "22DcjMZrMwC5Bpa5AGBsmjc5V9VuQrXG6N9ZtdUNyYGE": TokenData(
        "LST", "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So", "mSOL"
    ),
    "DMoqjmsuoru986HgfjqrKEvPv8YBufvBGADHUonkadC5": TokenData(
        "LST", "LSTxxxnJzKDFSLr4dUkPcmCf5VyryEqzPLz5j4bpxFp", "LST"
    ),
    "Bohoc1ikHLD7xKJuzTyiTyCwzaL5N7ggJQu75A8mKYM8": TokenData(
        "LST", "J1toso1uCk3RLmjorhTtrVwY9HJ7X8V9yYac6Y7kGCPn", "JitoSOL"
    ),
    # No Marginfi bank yet
    "NA": TokenData("LST", "sctmB7GPi5L2Q5G9tUSzXvhZ4YiDMEGcRov9KfArQpx", "dfdvSOL"),
}

PARTIAL_TOKEN_TABLE: Dict[str, TokenData] = {
    "2s37akK2eyBbp8DZgCm7RtsaEz8eJP3Nxd4urLHQv7yB": USDC,
    "CCKtUs6Cgwo4aaQUmBPmyoApH2gUDErxNZCAntD6LYGh": SOL,
}


def get_token_data_map(
    full: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, TokenData]:
    """Return the token registry; `full` defaults to settings.use_full_token_table."""
    if full is None:
        full = (settings or get_settings()).use_full_token_table
    return dict(FULL_TOKEN_TABLE if full else PARTIAL_TOKEN_TABLE)
