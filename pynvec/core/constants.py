# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Numerical tolerances and reference body parameters"""

import numpy as np

# Tolerances
EPSILON = float(np.finfo(np.float64).eps)  # absolute tolerance for boundary tests (2.22e-16)

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians
NM2M = 1852.0                  # nautical miles to metres
KNOT2MPS = NM2M / 3600.0       # knots to metres per second

# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0              # earth semimajor axis (m)
RP_WGS84 = 6356752.314245179      # polar radius (semi-minor axis) (m)
E_WGS84 = 0.08181919084262157     # eccentricity
FE_WGS84 = 0.0033528106647474805  # flattening (1 / 298.257223563)
RM_WGS84 = 6371008.771415059      # mean radius (2a + b) / 3 (m)

# GRS80
RE_GRS80 = 6378137.0
RP_GRS80 = 6356752.314140356
E_GRS80 = 0.08181919104281514
FE_GRS80 = 0.003352810681182319   # 1 / 298.257222101
RM_GRS80 = 6371008.771380119

# WGS72
RE_WGS72 = 6378135.0
RP_WGS72 = 6356750.520016094
E_WGS72 = 0.08181881066274845
FE_WGS72 = 0.003352779454167505   # 1 / 298.26
RM_WGS72 = 6371006.840005364

# International 1924 (Hayford)
RE_INTL_1924 = 6378388.0
RP_INTL_1924 = 6356911.9461279465
E_INTL_1924 = 0.08199188997902888
FE_INTL_1924 = 0.003367003367003367  # 1 / 297
RM_INTL_1924 = 6371229.315375983

# Airy 1830
RE_AIRY_1830 = 6377563.396
RP_AIRY_1830 = 6356256.909237285
E_AIRY_1830 = 0.08167337387414043
FE_AIRY_1830 = 0.0033408506414970775  # 1 / 299.3249646
RM_AIRY_1830 = 6370461.233745761

# Airy modified (Ireland 1965/1975)
RE_AIRY_MODIFIED = 6377340.189
RP_AIRY_MODIFIED = 6356034.447938534
E_AIRY_MODIFIED = 0.08167337387414247
FE_AIRY_MODIFIED = 0.0033408506414970775
RM_AIRY_MODIFIED = 6370238.275312845

# Bessel 1841
RE_BESSEL_1841 = 6377397.155
RP_BESSEL_1841 = 6356078.962818189
E_BESSEL_1841 = 0.08169683122252666
FE_BESSEL_1841 = 0.003342773182174806  # 1 / 299.1528128
RM_BESSEL_1841 = 6370291.090939396

# Clarke 1866
RE_CLARKE_1866 = 6378206.4
RP_CLARKE_1866 = 6356583.800000007
E_CLARKE_1866 = 0.08227185422298973
FE_CLARKE_1866 = 0.0033900753039276207  # 1 / 294.9786982
RM_CLARKE_1866 = 6370998.86666667

# Clarke 1880 (IGN)
RE_CLARKE_1880_IGN = 6378249.2
RP_CLARKE_1880_IGN = 6356515.000000028
E_CLARKE_1880_IGN = 0.08248325676336525
FE_CLARKE_1880_IGN = 0.003407549520011315  # 1 / 293.466021
RM_CLARKE_1880_IGN = 6371004.466666676

# Mars 2000 (IAU)
RE_MARS_2000 = 3398627.0
RP_MARS_2000 = 3378611.5288574793
E_MARS_2000 = 0.10836918094474898
FE_MARS_2000 = 0.005889281507656065  # 1 / 169.8044
RM_MARS_2000 = 3391955.176285826

# Spheres
R_EARTH = 6371000.8               # conventional mean earth radius (m)
R_MOON = 1737400.0                # IAU/IAG mean lunar radius (m)

# Spherical regions
LOOP_BOUND_MARGIN = 1.0e-7        # loop bounding rectangle expansion (deg), ~11 mm at the equator

# Kinematics
CPA_SAMPLES = 181                 # coarse samples before CPA refinement
INTERCEPT_SAMPLES = 361           # coarse samples before intercept root bracketing
