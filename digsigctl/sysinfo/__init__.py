"""Collection of system information for digital signage systems."""