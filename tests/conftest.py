"""Root-level pytest fixtures for all tests.

Provides shared fixtures:
- Locations and packages
- UPS XML response bodies for each operation
- A UPSConfig with dummy credentials
"""

import pytest

from ups_xml.config import UPSConfig
from ups_xml.models.location import Location, Package


# ============================================================================
# Pytest Markers
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring external services"
    )


# ============================================================================
# Domain Fixtures
# ============================================================================


@pytest.fixture
def ups_config() -> UPSConfig:
    """Config with dummy credentials."""
    return UPSConfig(key="KEY123", login="shipper", password="hunter2")


@pytest.fixture
def beverly_hills() -> Location:
    return Location(
        country_code="US",
        province="CA",
        city="Beverly Hills",
        address1="455 N. Rexford Dr.",
        address2="3rd Floor",
        postal_code="90210",
        phone="1-310-285-1013",
        fax="1-310-275-8159",
    )


@pytest.fixture
def ottawa() -> Location:
    return Location(
        country_code="CA",
        province="ON",
        city="Ottawa",
        address1="110 Laurier Avenue West",
        postal_code="K1P 1J1",
        phone="1-613-580-2400",
        address_type="commercial",
    )


@pytest.fixture
def london() -> Location:
    return Location(
        country_code="GB",
        city="London",
        address1="170 Westminster Bridge Rd",
        postal_code="SE1 7RW",
    )


@pytest.fixture
def chocolate_stuff() -> Package:
    """1.8 lbs, 2x6x12 inches."""
    return Package(weight=1.8, dimensions=(12, 6, 2), units="imperial")


@pytest.fixture
def book() -> Package:
    """0.25 kg, 24x15x2 cm."""
    return Package(weight=0.25, dimensions=(24, 15, 2), units="metric")


# ============================================================================
# UPS Response Fixtures
# ============================================================================


@pytest.fixture
def failure_response_xml() -> str:
    return """<?xml version="1.0"?>
<TrackResponse>
  <Response>
    <TransactionReference/>
    <ResponseStatusCode>0</ResponseStatusCode>
    <ResponseStatusDescription>Failure</ResponseStatusDescription>
    <Error>
      <ErrorSeverity>Hard</ErrorSeverity>
      <ErrorCode>151018</ErrorCode>
      <ErrorDescription>Invalid tracking number</ErrorDescription>
    </Error>
  </Response>
</TrackResponse>"""


@pytest.fixture
def rate_response_xml() -> str:
    return """<?xml version="1.0"?>
<RatingServiceSelectionResponse>
  <Response>
    <ResponseStatusCode>1</ResponseStatusCode>
    <ResponseStatusDescription>Success</ResponseStatusDescription>
  </Response>
  <RatedShipment>
    <Service><Code>03</Code></Service>
    <BillingWeight>
      <UnitOfMeasurement><Code>LBS</Code></UnitOfMeasurement>
      <Weight>2.0</Weight>
    </BillingWeight>
    <TotalCharges>
      <CurrencyCode>USD</CurrencyCode>
      <MonetaryValue>9.92</MonetaryValue>
    </TotalCharges>
  </RatedShipment>
  <RatedShipment>
    <Service><Code>12</Code></Service>
    <TotalCharges>
      <CurrencyCode>USD</CurrencyCode>
      <MonetaryValue>21.91</MonetaryValue>
    </TotalCharges>
  </RatedShipment>
  <RatedShipment>
    <Service><Code>01</Code></Service>
    <TotalCharges>
      <CurrencyCode>USD</CurrencyCode>
      <MonetaryValue>61.24</MonetaryValue>
    </TotalCharges>
  </RatedShipment>
</RatingServiceSelectionResponse>"""


@pytest.fixture
def single_rate_response_xml() -> str:
    return """<?xml version="1.0"?>
<RatingServiceSelectionResponse>
  <Response>
    <ResponseStatusCode>1</ResponseStatusCode>
    <ResponseStatusDescription>Success</ResponseStatusDescription>
  </Response>
  <RatedShipment>
    <Service><Code>07</Code></Service>
    <TotalCharges>
      <CurrencyCode>CAD</CurrencyCode>
      <MonetaryValue>88.10</MonetaryValue>
    </TotalCharges>
  </RatedShipment>
</RatingServiceSelectionResponse>"""


def _activity(description: str, date: str, time: str, address: str) -> str:
    return f"""
      <Activity>
        <ActivityLocation><Address>{address}</Address></ActivityLocation>
        <Status>
          <StatusType><Code>I</Code><Description>{description}</Description></StatusType>
        </Status>
        <Date>{date}</Date>
        <Time>{time}</Time>
      </Activity>"""


def tracking_response_xml(activities: str) -> str:
    """Wrap activity elements in a tracking response for one package."""
    return f"""<?xml version="1.0"?>
<TrackResponse>
  <Response>
    <ResponseStatusCode>1</ResponseStatusCode>
    <ResponseStatusDescription>Success</ResponseStatusDescription>
  </Response>
  <Shipment>
    <Shipper>
      <ShipperNumber>5FX007</ShipperNumber>
      <Address>
        <AddressLine1>175 AMBASSADOR</AddressLine1>
        <City>NAPERVILLE</City>
        <StateProvinceCode>IL</StateProvinceCode>
        <PostalCode>60540</PostalCode>
        <CountryCode>US</CountryCode>
      </Address>
    </Shipper>
    <ShipTo>
      <Address>
        <City>OTTAWA</City>
        <StateProvinceCode>ON</StateProvinceCode>
        <PostalCode>K1N5X8</PostalCode>
        <CountryCode>CA</CountryCode>
      </Address>
    </ShipTo>
    <ShipmentIdentificationNumber>1Z5FX0076803466397</ShipmentIdentificationNumber>
    <Package>
      <TrackingNumber>1Z5FX0076803466397</TrackingNumber>{activities}
    </Package>
  </Shipment>
</TrackResponse>"""


@pytest.fixture
def tracking_xml() -> str:
    """Newest-first activity log whose earliest scan is at the origin."""
    return tracking_response_xml(
        _activity("DELIVERED", "20080103", "143000",
                  "<City>OTTAWA</City><CountryCode>CA</CountryCode>")
        + _activity("OUT FOR DELIVERY", "20080103", "080000",
                    "<City>OTTAWA</City><CountryCode>CA</CountryCode>")
        + _activity("ARRIVAL SCAN", "20080102", "220000",
                    "<City>MISSISSAUGA</City><CountryCode>CA</CountryCode>")
        + _activity("DEPARTURE SCAN", "20080101", "230000",
                    "<City>CHICAGO</City><CountryCode>US</CountryCode>")
        + _activity("BILLING INFORMATION RECEIVED", "20071231", "120000",
                    "<CountryCode>US</CountryCode>")
    )


@pytest.fixture
def tracking_away_from_origin_xml() -> str:
    """Out-of-order activity log whose earliest scan is at a hub."""
    return tracking_response_xml(
        _activity("ARRIVAL SCAN", "20080102", "220000",
                  "<City>MISSISSAUGA</City><CountryCode>CA</CountryCode>")
        + _activity("ORIGIN SCAN", "20080101", "090000",
                    "<City>CHICAGO</City><CountryCode>US</CountryCode>")
        + _activity("Delivered", "20080103", "143000",
                    "<City>OTTAWA</City><CountryCode>CA</CountryCode>")
    )


@pytest.fixture
def tnt_response_xml() -> str:
    return """<?xml version="1.0"?>
<TimeInTransitResponse>
  <Response>
    <ResponseStatusCode>1</ResponseStatusCode>
    <ResponseStatusDescription>Success</ResponseStatusDescription>
  </Response>
  <TransitResponse>
    <PickupDate>2007-11-21</PickupDate>
    <TransitFrom>
      <AddressArtifactFormat>
        <PoliticalDivision2>PRAHA</PoliticalDivision2>
        <Country>CZECH REPUBLIC</Country>
        <CountryCode>CZ</CountryCode>
      </AddressArtifactFormat>
    </TransitFrom>
    <Disclaimer>All services are guaranteed if shipment is paid for in full by a payee in the United States.</Disclaimer>
    <ServiceSummary>
      <Service><Code>21</Code><Description>UPS Worldwide Express Plus</Description></Service>
      <Guaranteed><Code>Y</Code></Guaranteed>
      <EstimatedArrival>
        <BusinessTransitDays>2</BusinessTransitDays>
        <Time>09:30:00</Time>
        <PickupDate>2007-11-21</PickupDate>
        <Date>2007-11-24</Date>
        <DayOfWeek>SAT</DayOfWeek>
      </EstimatedArrival>
    </ServiceSummary>
    <ServiceSummary>
      <Service><Code>01</Code><Description>UPS Worldwide Express</Description></Service>
      <Guaranteed><Code>1</Code><Description>Money-back guarantee</Description></Guaranteed>
      <EstimatedArrival>
        <BusinessTransitDays>2</BusinessTransitDays>
        <Time>12:00:00</Time>
        <Date>2007-11-24</Date>
      </EstimatedArrival>
    </ServiceSummary>
    <ServiceSummary>
      <Service><Code>03</Code><Description>UPS Standard</Description></Service>
      <Guaranteed><Code>N</Code></Guaranteed>
      <EstimatedArrival>
        <BusinessTransitDays>6</BusinessTransitDays>
        <Time>23:30:00</Time>
        <Date>2007-11-30</Date>
      </EstimatedArrival>
    </ServiceSummary>
  </TransitResponse>
</TimeInTransitResponse>"""


@pytest.fixture
def tnt_candidates_xml() -> str:
    """Ambiguous destination: one origin candidate, two destination candidates."""
    return """<?xml version="1.0"?>
<TimeInTransitResponse>
  <Response>
    <ResponseStatusCode>1</ResponseStatusCode>
    <ResponseStatusDescription>Success</ResponseStatusDescription>
  </Response>
  <TransitResponse>
    <TransitFromList>
      <Candidate>
        <AddressArtifactFormat>
          <PoliticalDivision2>TIMONIUM</PoliticalDivision2>
          <PoliticalDivision1>MD</PoliticalDivision1>
          <Country>UNITED STATES</Country>
          <CountryCode>US</CountryCode>
          <PostcodePrimaryLow>21093</PostcodePrimaryLow>
          <PostcodePrimaryHigh>21094</PostcodePrimaryHigh>
        </AddressArtifactFormat>
      </Candidate>
    </TransitFromList>
    <TransitToList>
      <Candidate>
        <AddressArtifactFormat>
          <PoliticalDivision2>ROSWELL</PoliticalDivision2>
          <PoliticalDivision1>GA</PoliticalDivision1>
          <CountryCode>US</CountryCode>
          <PostcodePrimaryLow>30075</PostcodePrimaryLow>
        </AddressArtifactFormat>
      </Candidate>
      <Candidate>
        <AddressArtifactFormat>
          <PoliticalDivision3>ROSWELL PARK</PoliticalDivision3>
          <PoliticalDivision2>ROSWELL</PoliticalDivision2>
          <PoliticalDivision1>NM</PoliticalDivision1>
          <CountryCode>US</CountryCode>
          <PostcodePrimaryLow>88201</PostcodePrimaryLow>
          <PostcodePrimaryHigh>88203</PostcodePrimaryHigh>
        </AddressArtifactFormat>
      </Candidate>
    </TransitToList>
  </TransitResponse>
</TimeInTransitResponse>"""


def _av_result(rank: str, quality: str, city: str, state: str, low: str, high: str) -> str:
    return f"""
  <AddressValidationResult>
    <Rank>{rank}</Rank>
    <Quality>{quality}</Quality>
    <Address><City>{city}</City><StateProvinceCode>{state}</StateProvinceCode></Address>
    <PostalCodeLowEnd>{low}</PostalCodeLowEnd>
    <PostalCodeHighEnd>{high}</PostalCodeHighEnd>
  </AddressValidationResult>"""


def av_response_xml(results: str) -> str:
    """Wrap AddressValidationResult elements in a success response."""
    return f"""<?xml version="1.0"?>
<AddressValidationResponse>
  <Response>
    <ResponseStatusCode>1</ResponseStatusCode>
    <ResponseStatusDescription>Success</ResponseStatusDescription>
  </Response>{results}
</AddressValidationResponse>"""


@pytest.fixture
def av_single_xml() -> str:
    return av_response_xml(_av_result("1", "1.0", "TIMONIUM", "MD", "21093", "21094"))


@pytest.fixture
def av_four_xml() -> str:
    """Four results in carrier order; ranks deliberately not ascending."""
    return av_response_xml(
        _av_result("2", "0.9975000023841858", "TIMONIUM", "MD", "21093", "21094")
        + _av_result("1", "0.9975000023841858", "LUTHERVILLE TIMONIUM", "MD", "21093", "21094")
        + _av_result("4", "0.5", "COCKEYSVILLE", "MD", "21030", "21031")
        + _av_result("3", "0.7400", "LUTHERVILLE", "MD", "21093", "21094")
    )


@pytest.fixture
def make_activity_xml():
    """Factory for a single Activity element."""
    return _activity


@pytest.fixture
def make_tracking_xml():
    """Factory wrapping Activity elements in a tracking response."""
    return tracking_response_xml
