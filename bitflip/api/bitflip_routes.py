from fastapi import APIRouter, HTTPException

from bitflip.config.bconfig import LOG_LEVEL, OUTPUT_FORMATS
from bitflip.models.bitflip_request import BitflipRequest
from bitflip.services.bitflip_service import perform_bitflip, perform_bitsquatting
from bitflip.services.format import Format
from bitflip.services.generator import MODES, InvalidInputEncoding
import logging

router = APIRouter()

logging.basicConfig(level=LOG_LEVEL)

# Endpoint for single-bit-flip generation
@router.post("/")
async def bitflip(request: BitflipRequest):
    # Validating parameters
    if request.mode not in MODES:
        raise HTTPException(status_code=400, detail=f"Invalid mode, expected one of: {', '.join(MODES)}")
    if request.output_format not in OUTPUT_FORMATS:
        raise HTTPException(status_code=400, detail="Invalid output format")

    try:
        variants = perform_bitflip(
            value=request.value,
            mode=request.mode,
            encoding=request.encoding,
            allowed_chars=request.allowed_chars,
            limit=request.limit,
        )
        logging.debug("Bitflip generated variants count: %d", len(variants))
    except InvalidInputEncoding as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error("Internal server error: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))

    # Return the result based on requested output format
    if request.output_format == "list":
        return {"variants": Format(variants).list()}
    elif request.output_format == "csv":
        return {"variants": Format(variants).csv()}
    return variants

# Endpoint for domain bitsquatting
@router.post("/squat/{domain}")
async def squat(domain: str, subdomains: bool = True, unicode: bool = False):
    try:
        domains = perform_bitsquatting(domain=domain, subdomains=subdomains, unicode=unicode)
        logging.debug("Bitsquatter generated domains count: %d", len(domains))
        return domains
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logging.error("Internal server error: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))
