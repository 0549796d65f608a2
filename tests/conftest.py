from __future__ import annotations

import pytest

from OpenDriveStream import eventsFromString, parseFragment

PLAN_VIEW = '<planView><geometry s="0.0" x="0.0" y="0.0" hdg="0.0" length="100.0"><line/></geometry></planView>'
LANES = '<lanes><laneSection s="0.0"><center><lane id="0" type="none"/></center></laneSection></lanes>'

SAMPLE_XODR = """<?xml version="1.0" encoding="UTF-8"?>
<OpenDRIVE>
  <header revMajor="1" revMinor="7" name="sample" version="1.00" date="2026-10-18" north="100.0" south="-100.0" east="250.0" west="0.0" vendor="test">
    <geoReference><![CDATA[+proj=tmerc +lat_0=36.16 +lon_0=-86.78 +x_0=0 +y_0=0 +ellps=GRS80 +units=m +no_defs]]></geoReference>
  </header>
  <road id="1" junction="-1" length="100.0" name="Main Street" rule="RHT">
    <link>
      <successor elementType="junction" elementId="100"/>
    </link>
    <planView>
      <geometry s="0.0" x="0.0" y="0.0" hdg="0.0" length="60.0"><line/></geometry>
      <geometry s="60.0" x="60.0" y="0.0" hdg="0.0" length="40.0"><arc curvature="0.01"/></geometry>
    </planView>
    <elevationProfile>
      <elevation s="0.0" a="163.5" b="0.01" c="0.0" d="0.0"/>
      <elevation s="50.0" a="164.0" b="0.0" c="1e-4" d="-2.5e-6"/>
    </elevationProfile>
    <lateralProfile>
      <superelevation s="0.0" a="0.0" b="0.0" c="0.0" d="0.0"/>
      <shape s="0.0" t="-3.5" a="0.0" b="0.02" c="0.0" d="0.0"/>
    </lateralProfile>
    <lanes>
      <laneOffset s="0.0" a="0.0" b="0.0" c="0.0" d="0.0"/>
      <laneSection s="0.0">
        <left>
          <lane id="1" type="driving" level="false">
            <link><successor id="1"/></link>
            <width sOffset="0.0" a="3.5" b="0.0" c="0.0" d="0.0"/>
            <roadMark sOffset="0.0" type="solid" color="standard" width="0.12"/>
          </lane>
        </left>
        <center>
          <lane id="0" type="none">
            <roadMark sOffset="0.0" type="broken" color="white" laneChange="both"/>
          </lane>
        </center>
        <right>
          <lane id="-1" type="driving">
            <border sOffset="0.0" a="3.5" b="0.0" c="0.0" d="0.0"/>
          </lane>
        </right>
      </laneSection>
    </lanes>
    <objects>
      <object id="7" s="20.0" t="-6.0" zOffset="0.0" type="parkingSpace" name="bay" length="5.0" width="2.5" hdg="1.5707963267948966" orientation="none">
        <parkingSpace access="handicapped" restrictions="permit only"/>
        <borders>
          <border width="0.15" type="curb" outlineId="0" useCompleteOutline="true"/>
        </borders>
      </object>
    </objects>
  </road>
  <road id="2" junction="100" length="15.5">
    <link>
      <predecessor elementType="road" elementId="1" contactPoint="end"/>
      <successor elementType="road" elementId="3" elementS="12.0" elementDir="+"/>
    </link>
    <planView>
      <geometry s="0.0" x="100.0" y="0.0" hdg="0.0" length="15.5">
        <paramPoly3 aU="0.0" bU="15.5" cU="0.0" dU="0.0" aV="0.0" bV="0.0" cV="0.1" dV="-0.01" pRange="arcLength"/>
      </geometry>
    </planView>
    <lanes>
      <laneSection s="0.0" singleSide="true">
        <center><lane id="0" type="none"/></center>
        <right><lane id="-1" type="driving"><link><predecessor id="-1"/></link></lane></right>
      </laneSection>
    </lanes>
  </road>
  <road id="3" junction="-1" length="50.0" rule="LHT">
    <planView>
      <geometry s="0.0" x="120.0" y="5.0" hdg="0.1" length="20.0"><spiral curvStart="0.0" curvEnd="0.02"/></geometry>
      <geometry s="20.0" x="140.0" y="8.0" hdg="0.3" length="30.0"><poly3 a="0.0" b="0.0" c="0.001" d="0.0"/></geometry>
    </planView>
    <lanes>
      <laneSection s="0.0"><center><lane id="0" type="none"/></center></laneSection>
    </lanes>
  </road>
  <junction id="100" name="crossing" type="default">
    <connection id="0" incomingRoad="1" connectingRoad="2" contactPoint="start">
      <laneLink from="1" to="-1"/>
    </connection>
  </junction>
</OpenDRIVE>
"""


def makeRoad(attrs='id="5" junction="-1" length="100.0"', body=None):
    if body is None:
        body = PLAN_VIEW + LANES
    return f"<road {attrs}>{body}</road>"


def makeDocument(*roads: str, junctions: str = "") -> str:
    return '<OpenDRIVE><header revMajor="1" revMinor="7"/>' + "".join(roads) + junctions + "</OpenDRIVE>"


@pytest.fixture
def sample_xodr() -> str:
    return SAMPLE_XODR


@pytest.fixture
def read_fragment():
    """Parse a single element (e.g. ``<road>``) from markup text."""
    def _read(text, **kwargs):
        return parseFragment(eventsFromString(text), **kwargs)
    return _read
