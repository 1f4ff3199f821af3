"""studentised_range.core.statistics.quadrature

Fixed-order Gauss-Legendre quadrature.

A rule is stored as the positive half of a symmetric rule on [-1, 1]: each
(node, weight) pair is used at both +node and -node. Two rules are provided:

- ``GAUSS_LEGENDRE_20``: 10 pairs, used for the range distribution
- ``GAUSS_LEGENDRE_40``: 20 pairs, used for the maximum range distribution
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np


@dataclass(frozen=True)
class GaussLegendreRule:
    """Symmetric Gauss-Legendre rule on [-1, 1].

    Attributes:
        nodes: positive nodes, strictly increasing in (0, 1)
        weights: weights belonging to ``nodes`` (all positive)
    """

    nodes: np.ndarray
    weights: np.ndarray

    def __post_init__(self):
        if self.nodes.shape != self.weights.shape:
            raise ValueError("nodes and weights must have the same length")
        if self.nodes.size == 0:
            raise ValueError("a rule needs at least one node")
        if not (np.all(self.nodes > 0.0) and np.all(self.nodes < 1.0)):
            raise ValueError("nodes must lie in (0, 1)")
        if np.any(np.diff(self.nodes) <= 0.0):
            raise ValueError("nodes must be strictly increasing")
        if np.any(self.weights <= 0.0):
            raise ValueError("weights must be positive")

    @classmethod
    def from_pairs(cls, nodes: Sequence[float], weights: Sequence[float]) -> "GaussLegendreRule":
        """Build a rule from node/weight sequences in any order."""
        n = np.asarray(nodes, dtype=float)
        w = np.asarray(weights, dtype=float)
        order = np.argsort(n)
        n = n[order]
        w = w[order]
        n.setflags(write=False)
        w.setflags(write=False)
        return cls(nodes=n, weights=w)

    @property
    def order(self) -> int:
        """Total number of nodes (both signs)."""
        return 2 * int(self.nodes.size)

    def integrate(self, f: Callable[[float], float], a: float, b: float) -> float:
        """Integrate ``f`` over [a, b].

        Uses the midpoint-centred form
            h * sum_i w_i * (f(c - h*x_i) + f(c + h*x_i))
        with c = (a+b)/2 and h = (b-a)/2.
        """
        cntr = 0.5 * (a + b)
        wdth = 0.5 * (b - a)
        pairs = np.empty(self.nodes.size, dtype=float)
        for i, node in enumerate(self.nodes):
            x = wdth * float(node)
            pairs[i] = f(cntr - x) + f(cntr + x)
        return wdth * float(np.dot(self.weights, pairs))


GAUSS_LEGENDRE_20 = GaussLegendreRule.from_pairs(
    nodes=[
        0.993128599185094924786122388471320278,
        0.963971927277913791267666131197277222,
        0.912234428251325905867752441203298113,
        0.839116971822218823394529061701520685,
        0.746331906460150792614305070355641590,
        0.636053680726515025452836696226285937,
        0.510867001950827098004364050955250998,
        0.373706088715419560672548177024927237,
        0.227785851141645078080496195368574625,
        0.0765265211334973337546404093988382110,
    ],
    weights=[
        0.0176140071391521183118619623518528164,
        0.0406014298003869413310399522749321099,
        0.0626720483341090635695065351870416064,
        0.0832767415767047487247581432220462061,
        0.101930119817240435036750135480349876,
        0.118194531961518417312377377711382287,
        0.131688638449176626898494499748163135,
        0.142096109318382051329298325067164933,
        0.149172986472603746787828737001969437,
        0.152753387130725850698084331955097593,
    ],
)


GAUSS_LEGENDRE_40 = GaussLegendreRule.from_pairs(
    nodes=[
        0.998237709710559200349622702420586492,
        0.990726238699457006453054352221372155,
        0.977259949983774262663370283712903807,
        0.957916819213791655804540999452759285,
        0.932812808278676533360852166845205716,
        0.902098806968874296728253330868493104,
        0.865959503212259503820781808354619964,
        0.824612230833311663196320230666098774,
        0.778305651426519387694971545506494848,
        0.727318255189927103280996451754930549,
        0.671956684614179548379354514961494110,
        0.612553889667980237952612450230694877,
        0.549467125095128202075931305529517970,
        0.483075801686178712908566574244823005,
        0.413779204371605001524879745803713683,
        0.341994090825758473007492481179194310,
        0.268152185007253681141184344808596183,
        0.192697580701371099715516852065149895,
        0.116084070675255208483451284408024114,
        0.0387724175060508219331934440246232947,
    ],
    weights=[
        0.00452127709853319125847173287818533273,
        0.0104982845311528136147421710672796524,
        0.0164210583819078887128634848823639273,
        0.0222458491941669572615043241842085732,
        0.0279370069800234010984891575077210773,
        0.0334601952825478473926781830864108490,
        0.0387821679744720176399720312904461623,
        0.0438709081856732719916746860417154958,
        0.0486958076350722320614341604481463881,
        0.0532278469839368243549964797722605046,
        0.0574397690993915513666177309104259856,
        0.0613062424929289391665379964083985959,
        0.0648040134566010380745545295667527300,
        0.0679120458152339038256901082319239860,
        0.0706116473912867796954836308552868324,
        0.0728865823958040590605106834425178359,
        0.0747231690579682642001893362613246732,
        0.0761103619006262423715580759224948230,
        0.0770398181642479655883075342838102485,
        0.0775059479784248112637239629583263270,
    ],
)
