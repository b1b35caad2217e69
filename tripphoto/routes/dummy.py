"""
Static fixture endpoints used by the mobile client when the ERP is unreachable.
Every route accepts GET and POST and ignores the request body.
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse


router = APIRouter(prefix="/api/dummy", tags=["dummy"])

FIXTURES = {
    # The ERP answers an empty object on a successful logon
    "AuthenticateLogon": {},
    "GetTripData": {
        "driver": "BUDI SANTOSO",
        "codriver": "AGUS PRASETYO",
        "truckPlate": "B 1234 ABC",
        "plant": "SGI053",
        "ETADate": "2026-02-20T08:00:00Z",
        "truckDesc": "TRONTON 10 TON - MITSUBISHI FUSO",
    },
    "GetAllTripData": {
        "TripData": {
            "Result": [
                {"tripNumber": "SGI053-00149601"},
                {"tripNumber": "SGI053-00149602"},
                {"tripNumber": "SGI053-00149603"},
            ]
        }
    },
    "getTruckByAuthSite": {
        "TruckData": {
            "Result": [
                {"truckID": "TRK001", "truckPlate": "B 1234 ABC", "truckDesc": "TRONTON 10 TON - MITSUBISHI FUSO", "plantList": "SGI053"},
                {"truckID": "TRK002", "truckPlate": "B 5678 DEF", "truckDesc": "TRONTON 8 TON - HINO RANGER", "plantList": "SGI053"},
                {"truckID": "TRK003", "truckPlate": "D 9012 GHI", "truckDesc": "TRONTON 12 TON - ISUZU GIGA", "plantList": "SGI045"},
            ]
        }
    },
    "GetListPlant": {
        "Result": {
            "Plant": [
                {"Plant": "SGI053", "Name": "SGI YOGYAKARTA", "Lat": -7.797068, "Long": 110.370529},
                {"Plant": "SGI045", "Name": "SGI SEMARANG", "Lat": -6.966667, "Long": 110.416664},
                {"Plant": "SGI001", "Name": "SGI JAKARTA", "Lat": -6.200000, "Long": 106.816666},
            ]
        }
    },
    "getOutTruckCheck": {
        "TruckCheckData": {
            "Result": [
                {"Company": "SGI", "TripNum": "SGI053-00149601", "Odometer": 125000},
                {"Company": "SGI", "TripNum": "SGI053-00149602", "Odometer": 98500},
            ]
        }
    },
    "getTotalFromTripNumber": {"total": 15000, "type": "OUT"},
    "InsertStagingTable": {"success": True, "message": "Data berhasil disimpan (dummy)"},
    "ProcessTripTimeEntry": {"success": True, "message": "Trip berhasil diproses (dummy)"},
}


def _fixture_route(payload: dict):
    def _handler():
        return JSONResponse(content=payload)

    return _handler


for _name, _payload in FIXTURES.items():
    router.add_api_route(
        f"/{_name}",
        _fixture_route(_payload),
        methods=["GET", "POST"],
        name=f"dummy_{_name}",
    )
