"""
Event catalog data for the INTEGRA event log.

Each row is ``(code, restore, category, text)``: the 10-bit event code,
whether the row describes the restore (end) variant, the kind of long
description that applies to the event source, and the event text.
"""

EVENT_TABLE: tuple[tuple[int, bool, int, str], ...] = (
    (1, False, 6, "Voice messaging aborted"),
    (2, False, 3, "Change of user access code"),
    (2, True, 3, "Change of user access code"),
    (3, False, 6, "Change of user access code"),
    (4, False, 6, "Zones bypasses"),
    (5, False, 6, "Zones reset"),
    (6, False, 6, "Change of options"),
    (7, False, 6, "Permission for service access"),
    (7, True, 6, "Permission for service access removed"),
    (8, False, 6, "Addition of user"),
    (9, False, 6, "New user"),
    (10, False, 6, "Edition of user"),
    (11, False, 6, "User changed"),
    (12, False, 6, "Removal of user"),
    (13, False, 6, "User removed"),
    (14, False, 6, "Breaking user code"),
    (15, False, 6, "User access code broken"),
    (16, False, 6, "Addition of master"),
    (17, False, 6, "Edition of master"),
    (18, False, 6, "Removal of master"),
    (19, False, 4, "RS-downloading started"),
    (19, True, 4, "RS-downloading finished"),
    (20, False, 6, "TEL-downloading started"),
    (21, False, 6, "Monitoring station 1A test"),
    (22, False, 6, "Monitoring station 1B test"),
    (23, False, 6, "Monitoring station 2A test"),
    (24, False, 6, "Monitoring station 2B test"),
    (26, False, 2, "Access to cash machine granted"),
    (27, False, 3, "Breaking user code"),
    (27, True, 3, "Breaking user code"),
    (28, False, 3, "User access code broken"),
    (28, True, 3, "User access code broken"),
    (29, False, 7, "Automatically removed temporal user"),
    (30, False, 0, "Service access automatically blocked"),
    (31, False, 0, "Main panel software updated"),
    (32, False, 4, "System settings stored in FLASH memory"),
    (33, False, 0, "Starter started"),
    (34, False, 0, "Starter started from RESET jumper"),
    (36, False, 7, "Removal of single user"),
    (37, False, 2, "First access code entered"),
    (38, False, 3, "Voice messaging aborted"),
    (38, True, 3, "Voice messaging aborted"),
    (39, False, 1, "Vibration sensors test ok"),
    (40, False, 6, "Change of prefix"),
    (41, False, 0, "Change of winter time to summer time"),
    (42, False, 0, "Change of summer time to winter time"),
    (43, False, 6, "Guard round"),
    (44, False, 5, "First access code expired"),
    (45, False, 2, "First access code cancelled"),
    (46, False, 7, "Remote (telephone) control started"),
    (46, True, 7, "Remote (telephone) control finished"),
    (47, False, 10, "Remote switch turned on"),
    (47, True, 10, "Remote switch turned off"),
    (48, False, 30, "TCP/IP connection started (Internet)"),
    (48, True, 30, "TCP/IP connection finished (Internet)"),
    (49, False, 30, "TCP/IP connection failed (Internet)"),
    (50, False, 31, "IP address"),
    (51, False, 4, "Invalidation of system settings in FLASH"),
    (52, False, 6, "Service note cleared"),
    (53, False, 1, "Vibration sensors test interrupted"),
    (54, False, 30, "TCP/IP connection started (DloadX)"),
    (54, True, 30, "TCP/IP connection finished (DloadX)"),
    (55, False, 30, "TCP/IP connection failed (DloadX)"),
    (56, False, 30, "TCP/IP connection started (GuardX)"),
    (56, True, 30, "TCP/IP connection finished (GuardX)"),
    (57, False, 30, "TCP/IP connection failed (GuardX)"),
    (58, False, 30, "TCP/IP connection started (GSM socket)"),
    (58, True, 30, "TCP/IP connection finished (GSM socket)"),
    (59, False, 30, "TCP/IP connection failed (GSM socket)"),
    (60, False, 30, "TCP/IP connection started (GSM http)"),
    (60, True, 30, "TCP/IP connection finished (GSM http)"),
    (61, False, 30, "TCP/IP connection failed (GSM http)"),
    (62, False, 6, "User access"),
    (63, False, 6, "User exit"),
    (64, False, 4, "Keypad temporary blocked"),
    (65, False, 4, "Reader temporary blocked"),
    (66, False, 1, 'Arming in "Stay" mode'),
    (67, False, 1, 'Armin in "Stay, delay=0" mode'),
    (68, False, 0, "System real-time clock set"),
    (69, False, 6, "Troubles memory cleared"),
    (70, False, 6, "User logged in"),
    (71, False, 6, "User logged out"),
    (72, False, 6, "Door opened from LCD keypad"),
    (73, False, 13, "Door opened"),
    (74, False, 6, "System restored"),
    (75, False, 0, "ETHM/GPRS key changed"),
    (76, False, 6, "Messaging test started"),
    (77, False, 1, "Alarm monitoring delay"),
    (78, False, 1, "Network cable unplugged"),
    (78, True, 1, "Network cable ok"),
    (79, False, 9, "Messaging trouble"),
    (80, False, 9, "Messaging doubtful"),
    (81, False, 9, "Messaging ok"),
    (82, False, 9, "Messaging confirmed"),
    (83, False, 1, "3 wrong access codes"),
    (84, False, 1, "Alarm - proximity card reader tamper"),
    (84, True, 1, "Proximity card reader restore"),
    (85, False, 4, "Unauthorised door opening"),
    (86, False, 3, "User exit"),
    (86, True, 3, "User exit"),
    (87, False, 2, "Partition temporary blocked"),
    (88, False, 0, "GSM module trouble"),
    (88, True, 0, "GSM module ok"),
    (89, False, 4, "Long opened door"),
    (89, True, 4, "Long opened door closed"),
    (90, False, 0, "Downloading suspended"),
    (91, False, 0, "Downloading started"),
    (92, False, 1, "Alarm - module tamper (verification error)"),
    (92, True, 1, "Module tamper restore (verification ok)"),
    (93, False, 1, "Alarm - module tamper (lack of presence)"),
    (93, True, 1, "Module tamper restore (presence ok)"),
    (94, False, 1, "Alarm - module tamper (TMP input)"),
    (94, True, 1, "Module tamper restore (TMP input)"),
    (95, False, 12, "Output overload"),
    (95, True, 12, "Output overload restore"),
    (96, False, 12, "No output load"),
    (96, True, 12, "Output load present"),
    (97, False, 1, "Long zone violation"),
    (97, True, 1, "Long zone violation restore"),
    (98, False, 1, "No zone violation"),
    (98, True, 1, "No zone violation restore"),
    (99, False, 1, "Zone violation"),
    (99, True, 1, "Zone restore"),
    (100, False, 1, "Medical request (button)"),
    (100, True, 1, "Release of medical request button"),
    (101, False, 1, "Medical request (remote)"),
    (101, True, 1, "Remote medical request restore"),
    (110, False, 1, "Fire alarm"),
    (110, True, 1, "Fire alarm zone restore"),
    (111, False, 1, "Fire alarm (smoke detector)"),
    (111, True, 1, "Smoke detector zone restore"),
    (112, False, 1, "Fire alarm (combustion)"),
    (112, True, 1, "Combustion zone restore"),
    (113, False, 1, "Fire alarm (water flow)"),
    (113, True, 1, "Water flow detection restore"),
    (114, False, 1, "Fire alarm (temperature sensor)"),
    (114, True, 1, "Temperature sensor zone restore"),
    (115, False, 1, "Fire alarm (button)"),
    (115, True, 1, "Release of fire alarm button"),
    (116, False, 1, "Fire alarm (duct)"),
    (116, True, 1, "Duct zone restore"),
    (117, False, 1, "Fire alarm (flames detected)"),
    (117, True, 1, "Flames detection zone restore"),
    (120, False, 1, "PANIC alarm (keypad)"),
    (121, False, 2, "DURESS alarm"),
    (122, False, 1, "Silent PANIC alarm"),
    (122, True, 1, "Silent panic alarm zone restore"),
    (123, False, 1, "Audible PANIC alarm"),
    (123, True, 1, "Audible panic alarm zone restore"),
    (126, False, 5, "Alarm - no guard"),
    (130, False, 1, "Burglary alarm"),
    (130, True, 1, "Zone restore"),
    (131, False, 1, "Alarm (perimeter zone)"),
    (131, True, 1, "Perimeter zone restore"),
    (132, False, 1, "Alarm (interior zone)"),
    (132, True, 1, "Interior zone restore"),
    (133, False, 1, "Alarm (24h burglary zone)"),
    (133, True, 1, "24h burglary zone restore"),
    (134, False, 1, "Alarm (entry/exit zone)"),
    (134, True, 1, "Entry/exit zone restore"),
    (135, False, 1, "Alarm (day/night zone)"),
    (135, True, 1, "Day/night zone restore"),
    (136, False, 1, "Alarm (exterior zone)"),
    (136, True, 1, "Exterior zone restore"),
    (137, False, 1, "Alarm (tamper perimeter)"),
    (137, True, 1, "Tamper perimeter zone restore"),
    (139, False, 1, "Verified alarm"),
    (143, False, 11, "Alarm - communication bus trouble"),
    (143, True, 11, "Communication bus ok"),
    (144, False, 1, "Alarm (zone tamper)"),
    (144, True, 1, "Zone tamper restore"),
    (145, False, 1, "Alarm (module tamper)"),
    (145, True, 1, "Module tamper restore"),
    (150, False, 1, "Alarm (24h no burglary zone)"),
    (150, True, 1, "24h no burglary zone restore"),
    (151, False, 1, "Alarm (gas detector)"),
    (151, True, 1, "Gas detection zone restore"),
    (152, False, 1, "Alarm (refrigeration)"),
    (152, True, 1, "Refrigeration zone restore"),
    (153, False, 1, "Alarm (heat loss)"),
    (153, True, 1, "Heat loss zone restore"),
    (154, False, 1, "Alarm (water leak)"),
    (154, True, 1, "Water leak zone restore"),
    (155, False, 1, "Alarm (protection loop break)"),
    (155, True, 1, "Protection loop break zone restore"),
    (156, False, 1, "Alarm (day/night zone tamper)"),
    (156, True, 1, "Day/night zone tamper restore"),
    (157, False, 1, "Alarm (low gas level)"),
    (157, True, 1, "Low gas level zone restore"),
    (158, False, 1, "Alarm (high temperature)"),
    (158, True, 1, "High temperature zone restore"),
    (159, False, 1, "Alarm (low temperature)"),
    (159, True, 1, "Low temperature zone restore"),
    (161, False, 1, "Alarm (no air flow)"),
    (161, True, 1, "No air flow zone restore"),
    (162, False, 1, "Alarm (carbon monoxide detected)"),
    (162, True, 1, "Restore of carbon monoxide (CO) detection"),
    (163, False, 1, "Alarm (tank level)"),
    (163, True, 1, "Restore of tank level"),
    (200, False, 1, "Alarm (fire protection loop)"),
    (200, True, 1, "Fire protection loop zone restore"),
    (201, False, 1, "Alarm (low water pressure)"),
    (201, True, 1, "Low water pressure zone restore"),
    (202, False, 1, "Alarm (low CO2 pressure)"),
    (202, True, 1, "Low CO2 pressure zone restore"),
    (203, False, 1, "Alarm (valve sensor)"),
    (203, True, 1, "Valve sensor zone restore"),
    (204, False, 1, "Alarm (low water level)"),
    (204, True, 1, "Low water level zone restore"),
    (205, False, 1, "Alarm (pump activated)"),
    (205, True, 1, "Pump stopped"),
    (206, False, 1, "Alarm (pump trouble)"),
    (206, True, 1, "Pump ok"),
    (220, False, 1, "Keybox open"),
    (220, True, 1, "Keybox restore"),
    (300, False, 4, "System module trouble"),
    (300, True, 4, "System module ok"),
    (301, False, 4, "AC supply trouble"),
    (301, True, 4, "AC supply ok"),
    (302, False, 4, "Low battery voltage"),
    (302, True, 4, "Battery ok"),
    (303, False, 0, "RAM memory error"),
    (305, False, 4, "Main panel restart"),
    (306, False, 0, "Main panel settings reset"),
    (306, True, 0, "System settings restored from FLASH memory"),
    (312, False, 1, "Supply output overload"),
    (312, True, 1, "Supply output overload restore"),
    (330, False, 8, "Proximity card reader trouble"),
    (330, True, 8, "Proximity card reader ok"),
    (333, False, 11, "Communication bus trouble"),
    (333, True, 11, "Communication bus ok"),
    (339, False, 4, "Module restart"),
    (344, False, 1, "Receiver jam detected"),
    (344, True, 1, "Receiver jam ended"),
    (350, False, 0, "Transmission to monitoring station trouble"),
    (350, True, 0, "Transmission to monitoring station ok"),
    (351, False, 0, "Telephone line troubles"),
    (351, True, 0, "Telephone line ok"),
    (370, False, 1, "Alarm (auxiliary zone perimeter tamper)"),
    (370, True, 1, "Auxiliary zone perimeter tamper restore"),
    (373, False, 1, "Alarm (fire sensor tamper)"),
    (373, True, 1, "Fire sensor tamper restore"),
    (380, False, 1, "Zone trouble (masking)"),
    (380, True, 1, "Zone ok (masking)"),
    (381, False, 32, "Radio connection troubles"),
    (381, True, 32, "Radio connection ok"),
    (383, False, 1, "Alarm (zone tamper)"),
    (383, True, 1, "Zone tamper restore"),
    (384, False, 32, "Low voltage on radio zone battery"),
    (384, True, 32, "Voltage on radio zone battery ok"),
    (388, False, 1, "Zone trouble (masking)"),
    (388, True, 1, "Zone ok (masking)"),
    (400, False, 2, "Disarm"),
    (400, True, 2, "Arm"),
    (401, False, 2, "Disarm by user"),
    (401, True, 2, "Arm by user"),
    (402, False, 2, "Group disarm"),
    (402, True, 2, "Group arm"),
    (403, False, 15, "Auto-disarm"),
    (403, True, 15, "Auto-arm"),
    (404, False, 2, "Late disarm by user"),
    (404, True, 2, "Late arm by user"),
    (405, False, 2, "Deferred disarm by user"),
    (405, True, 2, "Deferred arm by user"),
    (406, False, 2, "Alarm cleared"),
    (407, False, 2, "Remote disarm"),
    (407, True, 2, "Remote arm"),
    (408, True, 1, "Quick arm"),
    (409, False, 1, "Disarm by zone"),
    (409, True, 1, "Arm by zone"),
    (411, False, 0, "Callback made"),
    (412, False, 0, "Downloading successfully finished"),
    (413, False, 0, "Unsuccessful remote downloading attempt"),
    (421, False, 3, "Access denied"),
    (421, True, 3, "Access denied"),
    (422, False, 3, "User access"),
    (422, True, 3, "User access"),
    (423, False, 1, "Alarm - armed partition door opened"),
    (441, True, 2, "Arm (STAY mode)"),
    (442, True, 1, "Arm by zone (STAY mode)"),
    (454, False, 2, "Arming failed"),
    (458, False, 2, "Delay activation time started"),
    (461, False, 1, "Alarm (3 wrong access codes)"),
    (462, False, 3, "Guard round"),
    (462, True, 3, "Guard round"),
    (570, False, 1, "Zone bypass"),
    (570, True, 1, "Zone unbypass"),
    (571, False, 1, "Fire zone bypass"),
    (571, True, 1, "Fire zone unbypass"),
    (572, False, 1, "24h zone bypass"),
    (572, True, 1, "24h zone unbypass"),
    (573, False, 1, "Burglary zone bypass"),
    (573, True, 1, "Burglary zone unbypass"),
    (574, False, 1, "Group zone bypass"),
    (574, True, 1, "Group zone unbypass"),
    (575, False, 1, "Zone auto-bypassed (violations)"),
    (575, True, 1, "Zone auto-unbypassed (violations)"),
    (601, False, 6, "Manual transmission test"),
    (602, False, 0, "Transmission test"),
    (604, False, 2, "Fire/technical zones test"),
    (604, True, 5, "End of fire/technical zones test"),
    (607, False, 2, "Burglary zones test"),
    (607, True, 5, "End of burglary zones test"),
    (611, False, 1, "Zone test ok"),
    (612, False, 1, "Zone not tested"),
    (613, False, 1, "Burglary zone test ok"),
    (614, False, 1, "Fire zone test ok"),
    (615, False, 1, "Panic zone test ok"),
    (621, False, 0, "Reset of event log"),
    (622, False, 0, "Event log 50% full"),
    (623, False, 0, "Event log 90% full"),
    (625, False, 6, "Setting system real-time clock"),
    (625, True, 0, "System real-time clock trouble"),
    (627, False, 4, "Service mode started"),
    (628, False, 4, "Service mode finished"),
    (800, False, 6, "Key long pressed"),
    (801, False, 4, "Settings sent - chime 1...64 ON"),
    (802, False, 4, "Settings sent - chime 1...64 OFF"),
    (803, False, 4, "Settings sent - chime 65..128 ON"),
    (804, False, 4, "Settings sent - chime 65..128 OFF"),
    (805, False, 4, "Settings sent - chime bypassed"),
    (982, False, 6, "Change of user telephone code"),
    (983, False, 6, "User telephone code broken"),
    (984, False, 1, "Alarm - ABAX device tamper (no connection)"),
    (984, True, 1, "ABAX device tamper restore (connection ok)"),
    (985, False, 15, "Exit time started"),
    (986, False, 1, "Warning alarm"),
    (987, False, 2, "Warning alarm cleared"),
    (988, False, 1, "Arming aborted"),
    (989, False, 7, "User logged in (INT-VG)"),
    (989, True, 7, "User logged out (INT-VG)"),
    (990, False, 4, "No connection with KNX system"),
    (990, True, 4, "Connection with KNX system ok"),
    (991, False, 1, "Zone auto-bypassed (tamper violations)"),
    (991, True, 1, "Zone auto-unbypassed (tamper violations)"),
    (992, False, 6, "Confirmed troubles"),
    (993, False, 6, "Confirmed use of RX key fob with low battery"),
    (994, False, 6, "Confirmed use of ABAX key fob with low battery"),
    (995, False, 3, "Remote RX key fob with low battery used"),
    (995, True, 3, "Remote RX key fob with low battery used"),
    (996, False, 3, "Remote ABAX key fob with low battery used"),
    (996, True, 3, "Remote ABAX key fob with low battery used"),
    (997, False, 4, "Long transmitter busy state"),
    (997, True, 4, "Restore of long transmitter busy state"),
    (998, False, 0, "Transmission test (station 1)"),
    (999, False, 0, "Transmission test (station 2)"),
    (1000, False, 1, "Trouble (zone)"),
    (1000, True, 1, "Trouble restore (zone)"),
    (1001, False, 2, "Forced arming"),
    (1002, False, 4, "No network (PING test)"),
    (1002, True, 4, "Network ok (PING test)"),
    (1003, False, 2, "Arming aborted"),
    (1004, False, 0, "Downloading started from ETHM/GSM module"),
    (1005, False, 6, "ETHM-1-downloading started"),
    (1006, False, 4, "Current battery test - absent/low voltage"),
    (1006, True, 4, "Current battery test - ok"),
    (1007, False, 1, "Exit time started"),
    (1008, False, 2, "Exit time started"),
    (1009, False, 14, "SMS control - begin"),
    (1009, True, 14, "SMS control - end"),
    (1010, False, 14, "SMS with no control received"),
    (1011, False, 14, "SMS from unauthorized telephone received"),
    (1012, False, 6, "CSD-downloading started"),
    (1013, False, 6, "GPRS-downloading started"),
    (1014, False, 4, "No signal on DSR input"),
    (1014, True, 4, "Signal on DSR input ok"),
    (1015, False, 4, "Time server error"),
    (1015, True, 4, "Time server ok"),
    (1016, False, 6, "Time synchronization started"),
    (1017, False, 9, "SMS messaging ok"),
    (1018, False, 9, "SMS messaging failed"),
    (1019, False, 3, "Remote key fob used"),
    (1019, True, 3, "Remote key fob used"),
    (1020, False, 1, "LCD/PTSA/ETHM-1 initiation error"),
    (1021, False, 1, "LCD/PTSA/ETHM-1 initiation ok"),
    (1022, False, 0, "Downloading request from ETHM-1 module"),
)
